"""Built-in demonstration payload.

Substituted when a report payload carries no batch name, so an empty log
still renders a complete report.
"""

from __future__ import annotations

import copy

_DEMO_PAYLOAD = {
    "main_data": {
        "batch_name": "test_batch",
        "process_start_time": "2025-07-10T15:18:45.424586-04:00",
        "process_end_time": "2025-07-10T15:18:45.692173-04:00",
        "current_version": "0.1.0",
        "viral_seq_version": "2.0.0",
        "number_of_libraries": 2,
        "total_reads": 20000,
        "raw_sequence_data": [["RV95", 20000], ["Other", 2000]],
    },
    "lib_data": {
        "TEST_DATA": {
            "raw_distribution": {
                "data": [["PR", 5000], ["V1V3", 3000], ["Other", 2000]],
            },
            "raw_sequence_analysis": {
                "data": [["GeneralFilterFailed", 2256], ["NoMatch", 270]],
                "drilldowns": [
                    {"label": "GeneralFilterFailed", "data": [["IN", 143], ["PR", 88]]},
                    {"label": "NoMatch", "data": [["IN", 100], ["PR", 100]]},
                ],
            },
            "number_at_regions": {
                "data": [["VIF", 1730, None, 1711], ["V1V3", 1500, 1600, 1700]],
            },
            "distinct_to_raw": {"data": [["IN", 0.007], ["PR", 0.003]]},
            "resampling_index": {"data": [["IN", 0.007], ["PR", 0.003]]},
            "size_distribution": {
                "data": {
                    "PR": [[0, None, 0], [0, None, 100], [1, 5, None], [2, 10, None]],
                    "IN": [[0, None, 0], [0, None, 100], [1, 5, None], [2, 10, None]],
                },
            },
        },
    },
}


def demo_payload() -> dict:
    """Fresh copy of the demonstration payload (callers may mutate it)."""
    return copy.deepcopy(_DEMO_PAYLOAD)
