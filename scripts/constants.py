"""Constants and enumerations for the TCS log viewer.

Centralizes magic strings into named constants for type safety and IDE support.
"""


class ChartKind:
    """Chart kinds offered by the charting backend."""

    PIE = "pie"
    COLUMN = "column"
    BAR = "bar"
    COMBO = "combo"

    ALL = {PIE, COLUMN, BAR, COMBO}


class DatasetName:
    """Named chart datasets carried by every library report."""

    RAW_DISTRIBUTION = "raw_distribution"
    RAW_SEQUENCE_ANALYSIS = "raw_sequence_analysis"
    NUMBER_AT_REGIONS = "number_at_regions"
    DETECTION_SENSITIVITY = "detection_sensitivity"
    DISTINCT_TO_RAW = "distinct_to_raw"
    RESAMPLING_INDEX = "resampling_index"
    SIZE_DISTRIBUTION = "size_distribution"

    REQUIRED = {
        RAW_DISTRIBUTION,
        RAW_SEQUENCE_ANALYSIS,
        NUMBER_AT_REGIONS,
        DISTINCT_TO_RAW,
        RESAMPLING_INDEX,
        SIZE_DISTRIBUTION,
    }


class PageTemplate:
    """Template fragment names, one per page kind."""

    MAIN = "page_main"
    LIBRARY = "page_lib"


class Slot:
    """Named document regions the engine writes into."""

    NAVIGATION = "nav"
    PAGE_CONTENT = "page_content"
    ERROR_MESSAGE = "chart_error_message"


class ElementId:
    """Element ids inside the page template fragments."""

    # Overview page
    BATCH_NAME = "batch_name"
    PROCESSED_TIME = "processed_time"
    TCS_VERSION = "tcs_version"
    VIRAL_SEQ_VERSION = "viral_seq_version"
    NUMBER_OF_LIBRARIES = "number_of_libraries"
    TOTAL_READS = "total_reads"
    RAW_SEQUENCE_CHART = "raw-sequence-chart"

    # Library page
    RAW_DISTRIBUTION = "raw_distribution"
    RAW_SEQUENCE_ANALYSIS = "raw_sequence_analysis"
    DRILLDOWN_CONTAINER = "drilldown_container"
    DRILLDOWN_LABEL = "drilldown_label"
    DRILLDOWN_CHART = "raw_sequence_analysis_drilldown"
    NUMBER_AT_REGIONS = "number_at_regions"
    DETECTION_SENSITIVITY = "detection_sensitivity"
    DISTINCT_TO_RAW = "distinct_to_raw"
    RESAMPLING_INDEX = "resampling_index"
    SIZE_DISTRIBUTION = "size_distribution"


CURRENT_PAGE_CLASS = "current_page"

DRILLDOWN_LABEL_PREFIX = "Raw Sequence Analysis > "

DEFAULT_ERROR_CONTACT = "clarkmu@email.unc.edu"

ERROR_MESSAGE_TEMPLATE = (
    "There was an error displaying your data. "
    "To help us improve, please forward this file or link to {contact}."
)
