"""Names of the files a pipeline run writes, derived from one prefix."""

from __future__ import annotations

from dataclasses import dataclass

SUFFIXES: dict[str, str] = {
    "Arc": ".Arc",
    "updatedEdge": ".updated.edge",
    "contig": ".contig",
    "contig_short": ".contig_short",
    "contig_long": ".contig_long",
    "ContigIndex": ".ContigIndex",
    "seeds": ".seeds",
    "mst_seeds": ".mst_seeds",
    "mst_pe_seeds": ".mst_pe_seeds",
    "cdg_seeds": ".cdg_seeds",
    "pe_seeds": ".pe_seeds",
    "read2contig_sam": ".read2contig.sam",
    "contig2r1_sam": ".contig2r1.sam",
    "contig2r2_sam": ".contig2r2.sam",
    "read2contig": ".read2contig",
    "read2contig_v1": ".read2contig_v1",
    "contig2read_v1": ".contig2read_v1",
    "contig2r1_v1": ".contig2r1_v1",
    "contig2r2_v1": ".contig2r2_v1",
    "contig_pe_conns": ".contig_pe_conns",
    "pe_graph": ".pe_graph",
    "pe_info": ".pe_info",
    "pe_pairs": ".pe_pair",
    "pe_singles": ".pe_singles",
    "pe_boths": ".pe_boths",
    "barcodeList": ".barcodeList",
    "barcodeFreq": ".barcodeFreq",
    "readNameList": ".readNameList",
    "BarcodeOnBin": ".barcodeOnBin",
    "BarcodeOnContig": ".barcodeOnContig",
    "BarcodeOnContig_fake": ".barcodeOnContig_fake",
    "contigOnBarcode": ".contigOnBarcode",
    "contig_at_barcode_v1": ".contig_at_barcode_v1",
    "barcode_at_contig_v1": ".barcode_at_contig_v1",
    "cluster": ".cluster",
    "mintree": ".mintree",
    "mintreetrunk": ".mintree_trunk",
    "mintreetrunklinear": ".mintree_trunk_linear",
    "mst_error": ".mst_error",
    "bin_cluster": ".bin_cluster",
    "connInfo": ".connInfo",
    "connPath": ".connPath",
    "contigroad": ".contigroad",
    "contigroadfill": ".contigroadfill",
    "super_used": ".super_used",
    "super_only": ".super_only",
    "super_and_left": ".super_and_left",
    "seeds_cluster_seeds": ".seeds_cluster_seeds",
    "gap_oo": ".gap_oo",
    "gap_area": ".gap_area",
    "gap_sim": ".gap_sim",
    "scaff_seqs": ".scaff_seqs",
    "scaff_infos": ".scaff_infos",
    "orignial_scaff_infos": ".orignial_scaff_infos",
    "updated_scaff_infos": ".updated_scaff_infos",
    "scaff_gap2filler_seqs": ".scaff_gap2filler_seqs",
    "name_map": ".name_map",
    "trunk_fill": ".trunk_fill",
    "gap_fill_detail": ".gap_fill_detail",
    "seed_extern_fill": ".seed_extern_fill",
    "barcodeOnScaff": ".barcodeOnScaff",
    "barcodeOnGaps_intersection": ".barcodeOnGaps_intersection",
    "barcodeOnGaps_union": ".barcodeOnGaps_union",
}


@dataclass
class FileNames:
    """Builds file names from a common prefix."""

    prefix: str = ""

    def path(self, kind: str, tag: int | str | None = None) -> str:
        """File name for ``kind``.

        An integer ``tag`` other than 0 appends ``_round_<n>``; a non-empty
        string ``tag`` is inserted between the prefix and the suffix.
        """
        try:
            suffix = SUFFIXES[kind]
        except KeyError:
            raise KeyError(f"unknown file kind: {kind!r}") from None
        if tag is None or tag == 0 or tag == "":
            return self.prefix + suffix
        if isinstance(tag, bool) or not isinstance(tag, (int, str)):
            raise TypeError(f"tag must be an int or a str, not {type(tag).__name__}")
        if isinstance(tag, int):
            return f"{self.prefix}{suffix}_round_{tag}"
        return f"{self.prefix}.{tag}{suffix}"