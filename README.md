# scaffkit

A small Python library of building blocks for genome scaffolding and gap
filling with long reads. It uses only the standard library.

## What is inside

- `scaffkit.fasta` reads FASTA records with `iter_fasta` and
  `read_all_fasta`. Headers can be kept verbatim (`NormalHead`), split into
  id and description (`IdDescHead`), or parsed as contig headers
  (`SOAP2ContigHead`, `>ID length LEN cvg_COV_tip_TIP`) or scaffold-gap
  headers (`ScaffSplitGapHead` with a `GapType`). Malformed input raises
  `FastaFormatError`.
- `scaffkit.fastq` reads four-line FASTQ records with `iter_fastq` and
  `read_all_fastq`, with `NormalHead`, `IdDescHead` or barcoded
  `StLFRHeader` headers. Malformed input raises `FastqFormatError`.
- `scaffkit.align_result` holds CIGAR operations (`Cigar`, `MatchInfo`,
  `MatchDetail.from_cigar`), MD tag match counts (`MDData`) and optional
  `NAME:TYPE:CONTENT` fields (`ExtraInfo`).
- `scaffkit.sam` parses SAM header lines (`parse_head`) and alignment lines
  (`parse_match_data`) into `MatchData`, with FLAG helpers such as
  `is_primary_match`, `is_reverse_complement` and `calc_read1_position`.
- `scaffkit.pair_sam` groups consecutive SAM lines of one read name and
  returns the primary first and second reads (`PairedSamParser`).
- `scaffkit.paf` parses PAF lines (`PafItem.parse`), decoding `cg` and `MD`
  fields, and can project a whole read onto its target (`flatten`).
- `scaffkit.scaffinfo` loads, renumbers, repositions and prints scaffold
  layout files (`ScaffInfoHelper`, `ScaffInfo`, `ContigDetail`).
- `scaffkit.contig_pair` works out the orientation (`OOType`) and gap of a
  pair of contigs from strands, scaffold neighbours or two PAF alignments
  (`PairPN`).
- `scaffkit.ont2gap` orders candidate gap fillers (`ONT2GapInfo`) by gap
  size, distance from the median gap, absolute gap, or an alignment score.
- `scaffkit.ranges` merges overlapping intervals (`SubSets`) and keeps a
  bounded set of non-repeating intervals (`NonRepeatFilter`).
- `scaffkit.seq` provides `Seq` and helpers such as `reverse_complement`,
  `block_seq`, `is_valid`, `has_n` and `is_palindrome`.
- `scaffkit.argsparser` declares typed required and optional options and
  parses a command line (`ArgsParser`, `ArgType`, `ArgsError`,
  `HelpRequested`).
- `scaffkit.filenames` derives the names of pipeline output files from a
  common prefix (`FileNames.path`).
- `scaffkit.files` opens plain or `.gz` text files (`open_reader`,
  `open_writer`) and walks lines (`each_line`).
- `scaffkit.freq` counts keys (`Freq`), updates counter mappings (`incr`,
  `update_as_biggest`, `update_as_smallest`) and finds the count range
  covering a share of a total (`middle_valid`).
- `scaffkit.stringtools` has splitting and trimming helpers.

## Installation

```
pip install .
```

## Example

```python
import io
from scaffkit.fasta import iter_fasta, SOAP2ContigHead
from scaffkit.seq import reverse_complement

data = io.StringIO(">3 length 64 cvg_0.0_tip_0\nACGT\nAC\n")
for record in iter_fasta(data, SOAP2ContigHead):
    print(record.head.contig_id, len(record.seq))  # 3 6

print(reverse_complement("AACG"))  # CGTT
```

```python
from scaffkit.ranges import SubSets

subsets = SubSets()
subsets.push(20, 30)
subsets.push(21, 35)
print(subsets.pop())  # (20, 35)
```

## What it does not do

scaffkit is a library only: it installs no command-line program and runs
no gap-filling pipeline of its own. It does not align reads; it reads the
SAM and PAF output of an aligner you run yourself.

## Running the tests

```
pip install .[test]
pytest
```