# threetaps/exporters.py
import json
import os
from typing import Any, Dict

import pandas as pd


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def results_frame(result: Dict[str, Any]) -> pd.DataFrame:
    """
    One row per posting in a search response's "results" list.
    Nested values (annotations, images) are kept as JSON text so the CSV stays flat.
    """
    rows = []
    for posting in result.get("results", []) or []:
        row = {}
        for key, value in posting.items():
            if isinstance(value, (dict, list)):
                value = json.dumps(value, sort_keys=True)
            row[key] = value
        rows.append(row)
    return pd.DataFrame(rows)


def export_results_csv(result: Dict[str, Any], out_path: str) -> pd.DataFrame:
    df = results_frame(result)
    df.to_csv(out_path, index=False)
    return df
