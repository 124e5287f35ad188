"""seqkit -- size, containment, deduplication and insertion sort over sequences."""

from seqkit.sequence_utils import size, equals, contains, remove_duplicates, sort
from seqkit.reductions import sum, mul, factorial
from seqkit.render import format_sequence, format_inline
from seqkit.samples import SAMPLES, run_sample
from seqkit.config import VERSION as __version__
