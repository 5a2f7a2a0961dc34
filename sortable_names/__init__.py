from sortable_names.collation import collation_key, compare
from sortable_names.names import (
    SortableNames,
    SortableNamesConfig,
    SortableNamesConfigError,
    SortedName,
    get_sortable,
    sort_names,
)
from sortable_names.names_data import (
    DEFAULT_ARTICLES,
    DEFAULT_HONORIFICS,
    DEFAULT_NAME_SUFFIXES,
    DEFAULT_ORG_WORDS,
)
