"""
Genotype domain model.

Builds the VRSATILE messages that describe a variant: GeneDescriptor,
VcfRecord, Expression, Extension and VariationDescriptor.

High-level role in ppktools:
- VariationDescriptorRecord validates its fields on init.
- VariationDescriptorRecord.to_variation_descriptor() returns the GA4GH message.
- interpretation.py wraps descriptors into Variant/GenomicInterpretations.

Expressions are de-duplicated by (syntax, value), so adding the same HGVS string twice
(e.g. once raw, once normalized) yields a single Expression.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import phenopackets.schema.v2 as pps2

from .constants.allelic_state import GENO_ALLELIC_STATE_CODES, allelic_state
from .curie import validate_curie


# ----------------------------------
# Patterns and small constant tables
# ----------------------------------

_ALLOWED_ASSEMBLIES = {"GRCh37", "GRCh38", "hg19", "hg38"}
_ALLOWED_MOLECULE_CONTEXTS = {"unspecified_molecule_context", "genomic", "transcript", "protein"}

MOSAICISM = "mosaicism"
ALLELE_FREQUENCY = "allele-frequency"

# Permissive HGVS g. SNV pattern with optional "chr" prefix (captures chrom/pos/ref/alt)
_HGVS_G_SNV = re.compile(
    r"""
    ^\s*
    (?:chr)?(?P<chrom>[0-9XYM]+)       # chromosome number or X/Y/M
    :g\.
    (?P<pos>\d+)                       # 1-based position
    (?P<ref>[ACGT]+)>(?P<alt>[ACGT]+)  # simple SNV
    \s*$
    """,
    re.IGNORECASE | re.VERBOSE,
)

# Transcript + c. part, e.g. "NM_000000.0:c.100A>G", "ENST00000205557.12:c.2428G>A"
_HGVSC_TXT_RE = re.compile(
    r"""
    ^\s*
    (?P<tx>
        (?:N[MR]|X[MR]|E(?:NST)?)      # NM/NR/XM/XR/ENST
        [_]?\d+(?:\.\d+)?              # id with optional dot-version
    )
    :
    (?P<c>c\..+)$
    """,
    re.IGNORECASE | re.VERBOSE,
)


# ---------------------------
# Small message constructors
# ---------------------------


def gene_descriptor(
    value_id: str,
    symbol: str,
    description: str = "",
    alternate_ids: Iterable[str] = (),
    alternate_symbols: Iterable[str] = (),
    xrefs: Iterable[str] = (),
) -> pps2.GeneDescriptor:
    """GeneDescriptor for e.g. gene_descriptor('HGNC:2211', 'COL6A1')."""
    validate_curie(value_id)
    gd = pps2.GeneDescriptor(value_id=value_id, symbol=symbol, description=description)
    gd.alternate_ids.extend(alternate_ids)
    gd.alternate_symbols.extend(alternate_symbols)
    gd.xrefs.extend(xrefs)
    return gd


def vcf_record(
    assembly: str,
    chromosome: str,
    position: int,
    ref_allele: str,
    alt_allele: str,
    *,
    id: str = "",
    qual: str = "",
    filter: str = "",
    info: str = "",
) -> pps2.VcfRecord:
    """
    VcfRecord for a single variant. Pass filter='PASS' for a passing call.
    """
    if not isinstance(position, int) or position < 0:
        raise ValueError(f"position must be a non-negative integer, got {position!r}")
    for attr, val in (("ref_allele", ref_allele), ("alt_allele", alt_allele), ("chromosome", chromosome)):
        if not isinstance(val, str) or not val.strip():
            raise ValueError(f"{attr} must be a nonempty string")
    return pps2.VcfRecord(
        genome_assembly=assembly,
        chrom=chromosome,
        pos=position,
        id=id,
        ref=ref_allele,
        alt=alt_allele,
        qual=qual,
        filter=filter,
        info=info,
    )


class Expressions:
    """Factories for VRSATILE Expression messages."""

    @staticmethod
    def hgvs(value: str) -> pps2.Expression:
        return pps2.Expression(syntax="hgvs", value=value)

    @staticmethod
    def hgvs_cdna(value: str) -> pps2.Expression:
        """An HGVS cDNA expression (e.g. 'NM_001848.2:c.877G>A')."""
        return pps2.Expression(syntax="hgvs.c", value=value)

    @staticmethod
    def hgvs_genomic(value: str) -> pps2.Expression:
        """An HGVS genomic expression (e.g. 'NC_000001.11:g.27549219del')."""
        return pps2.Expression(syntax="hgvs.g", value=value)

    @staticmethod
    def transcript_reference(value: str) -> pps2.Expression:
        return pps2.Expression(syntax="transcript_reference", value=value)

    @staticmethod
    def spdi(value: str) -> pps2.Expression:
        return pps2.Expression(syntax="spdi", value=value)

    @staticmethod
    def iscn(value: str) -> pps2.Expression:
        return pps2.Expression(syntax="iscn", value=value)


class Extensions:
    """Factories for VRSATILE Extension messages. Percentages are written as '12.5%'."""

    @staticmethod
    def mosaicism(percentage: float) -> pps2.Extension:
        return pps2.Extension(name=MOSAICISM, value=f"{percentage:.1f}%")

    @staticmethod
    def allele_frequency(frequency: float) -> pps2.Extension:
        return pps2.Extension(name=ALLELE_FREQUENCY, value=f"{frequency:.1f}%")


# ----------------------
# Core domain data class
# ----------------------


@dataclass
class VariationDescriptorRecord:
    """
    Represents a single variant as it will appear in a VariantInterpretation.

    Attributes:
        id: Descriptor identifier (free text, e.g. 'var_AlnzRCyPurQrLcCeHYebXZRUb').
        gene: Optional GeneDescriptor for the gene context.
        hgvsc: Coding DNA HGVS (e.g. “NM_001848.2:c.877G>A”).
        hgvsg: Genomic HGVS (e.g. “NC_000021.9:g.45989626G>A” or “chr21:g.45989626G>A”).
        vcf: Optional VcfRecord.
        zygosity: Allelic state label (heterozygous, homozygous, hemizygous, unspecified zygosity).
        molecule_context: genomic, transcript, protein or unspecified_molecule_context.
        label, description: Free text.
        structural_type: Sequence Ontology term (e.g. SO:0001483 SNV).
        xrefs, alternate_labels: Additional identifiers and names.
        mosaicism: Percentage of cells carrying the variant.
        allele_frequency: Variant allele frequency, in percent.
        expressions: Any additional Expression messages.
    """

    id: str
    gene: Optional[pps2.GeneDescriptor] = None
    hgvsc: Optional[str] = None
    hgvsg: Optional[str] = None
    vcf: Optional[pps2.VcfRecord] = None
    zygosity: Optional[str] = None
    molecule_context: str = "unspecified_molecule_context"
    label: str = ""
    description: str = ""
    structural_type: Optional[pps2.OntologyClass] = None
    xrefs: List[str] = field(default_factory=list)
    alternate_labels: List[str] = field(default_factory=list)
    mosaicism: Optional[float] = None
    allele_frequency: Optional[float] = None
    expressions: List[pps2.Expression] = field(default_factory=list)

    # -----------------------------
    # Input validation on init time
    # -----------------------------

    def __post_init__(self) -> None:
        """Validate enumerated fields and the shape of HGVS strings."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("id must be a nonempty string")

        if self.zygosity is not None and self.zygosity not in GENO_ALLELIC_STATE_CODES:
            raise ValueError(f"Invalid zygosity: {self.zygosity!r}")

        if self.molecule_context not in _ALLOWED_MOLECULE_CONTEXTS:
            raise ValueError(f"Invalid molecule context: {self.molecule_context!r}")

        if self.hgvsc is not None:
            tx, c_part = self._parse_hgvsc(self.hgvsc)
            if not (tx and c_part):
                raise ValueError(f"Invalid hgvsc (expected '<transcript>:c.<change>'): {self.hgvsc!r}")

        if self.vcf is not None and self.vcf.genome_assembly not in _ALLOWED_ASSEMBLIES:
            raise ValueError(f"Unrecognized genome assembly: {self.vcf.genome_assembly!r}")

        for attr in ("mosaicism", "allele_frequency"):
            val = getattr(self, attr)
            if val is not None and not (0.0 <= float(val) <= 100.0):
                raise ValueError(f"{attr} must be a percentage between 0 and 100, got {val!r}")

    # ----------------------
    # Convenience properties
    # ----------------------

    @property
    def transcript(self) -> Optional[str]:
        """Transcript accession parsed from hgvsc, e.g. 'NM_001848.2'."""
        tx, _ = self._parse_hgvsc(self.hgvsc)
        return tx

    # ------------------------------------------------
    # Core responsibility: build a VariationDescriptor
    # ------------------------------------------------

    def to_variation_descriptor(self) -> pps2.VariationDescriptor:
        vd = pps2.VariationDescriptor(
            id=self.id,
            label=self.label,
            description=self.description,
            molecule_context=pps2.MoleculeContext.Value(self.molecule_context),
        )
        if self.gene is not None:
            vd.gene_context.CopyFrom(self.gene)

        if self.hgvsc:
            self._add_expression_if_missing(vd, Expressions.hgvs_cdna(self.hgvsc.strip()))
        g_value = self._normalize_g_expression(self.hgvsg)
        if g_value:
            self._add_expression_if_missing(vd, Expressions.hgvs_genomic(g_value))
        for expr in self.expressions:
            self._add_expression_if_missing(vd, expr)

        if self.vcf is not None:
            vd.vcf_record.CopyFrom(self.vcf)
        if self.zygosity:
            vd.allelic_state.CopyFrom(allelic_state(self.zygosity))
        if self.structural_type is not None:
            vd.structural_type.CopyFrom(self.structural_type)

        vd.xrefs.extend(self.xrefs)
        vd.alternate_labels.extend(self.alternate_labels)

        if self.mosaicism is not None:
            vd.extensions.append(Extensions.mosaicism(self.mosaicism))
        if self.allele_frequency is not None:
            vd.extensions.append(Extensions.allele_frequency(self.allele_frequency))
        return vd

    # -----------------------
    # Internal helper methods
    # -----------------------

    @staticmethod
    def _parse_hgvsc(hgvsc: Optional[str]) -> tuple[Optional[str], Optional[str]]:
        """
        Extract transcript identifier and the c. part from an hgvsc string.

        Examples:
            "NM_000000.0:c.100A>G" -> ("NM_000000.0", "c.100A>G")
            "ENST00000205557.12:c.2428G>A" -> ("ENST00000205557.12", "c.2428G>A")
        """
        if not isinstance(hgvsc, str):
            return None, None
        m = _HGVSC_TXT_RE.match(hgvsc.strip())
        if not m:
            return None, None
        return m.group("tx"), m.group("c")

    @staticmethod
    def _normalize_g_expression(hgvsg: Optional[str]) -> Optional[str]:
        """
        Normalize a genomic HGVS like 'chr16:g.100a>g' -> '16:g.100A>G' for simple SNVs.
        For non-SNV or non-matching patterns, return the trimmed original string.
        """
        if not isinstance(hgvsg, str) or not hgvsg.strip():
            return None
        s = hgvsg.strip()
        m = _HGVS_G_SNV.match(s)
        if m:
            return f"{m.group('chrom')}:g.{m.group('pos')}{m.group('ref').upper()}>{m.group('alt').upper()}"
        if s.lower().startswith("chr"):
            return s[3:]
        return s

    @staticmethod
    def _add_expression_if_missing(vd: pps2.VariationDescriptor, expr: pps2.Expression) -> None:
        """Append `expr` unless an Expression with the same syntax and value is already present."""
        if (expr.syntax, expr.value) in {(e.syntax, e.value) for e in vd.expressions}:
            return
        vd.expressions.append(expr)
