# DNA Matcher: Boyer-Moore-Horspool search over the A/C/G/T alphabet

__version__ = "0.1.0"

from .exceptions import (
    MatcherError,
    InvalidAlphabetError,
    InvalidPatternError,
)
from .alphabet import (
    Nucleobase,
    NUCLEOBASES,
    ALPHABET_SIZE,
    symbol_index,
    check_nucleobase,
    check_dna,
    validate_dna,
)
from .skip_table import (
    SkipTable,
    build_skip_table,
)
from .horspool import (
    HorspoolSearcher,
    MatchResult,
    search,
    find_first,
    naive_search,
)
from .sequence_generator import (
    generate_sequence,
    select_nucleobase,
)
from .config import MatcherConfig
