"""Lists of raw columns shared with the reporting pipeline."""

NB_UNIQ_VISITORS = "nb_uniq_visitors"
NB_VISITS = "nb_visits"
NB_ACTIONS = "nb_actions"
MAX_ACTIONS = "max_actions"
SUM_VISIT_LENGTH = "sum_visit_length"
VISIT_LENGTH = "visit_length"
BOUNCE_COUNT = "bounce_count"
NB_VISITS_CONVERTED = "nb_visits_converted"

# Raw counters read by the processed metrics
RAW_COLUMNS = [
    NB_VISITS,
    NB_VISITS_CONVERTED,
    NB_ACTIONS,
    VISIT_LENGTH,
    BOUNCE_COUNT,
]

# Archived rows may store counters under their numeric index instead of the name
RAW_COLUMN_INDEXES = {
    NB_UNIQ_VISITORS: 1,
    NB_VISITS: 2,
    NB_ACTIONS: 3,
    MAX_ACTIONS: 4,
    SUM_VISIT_LENGTH: 5,
    VISIT_LENGTH: 5,
    BOUNCE_COUNT: 6,
    NB_VISITS_CONVERTED: 7,
}

# Reverse lookup used when rendering; visit_length wins over sum_visit_length
RAW_COLUMN_NAMES_BY_INDEX = {
    1: NB_UNIQ_VISITORS,
    2: NB_VISITS,
    3: NB_ACTIONS,
    4: MAX_ACTIONS,
    5: VISIT_LENGTH,
    6: BOUNCE_COUNT,
    7: NB_VISITS_CONVERTED,
}

EXTRA_PROCESSED_METRICS_METADATA_NAME = "extra_processed_metrics"
