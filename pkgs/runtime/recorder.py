"""
Step recording for executor runs with multiple output formats.

Provides StepRecorder with CSV, JSONL, and Parquet output. An executor
given a recorder logs one row per step: the step number, the elapsed
time and whether the step finished the computation.
"""
import csv
import json
import os
import logging
from typing import Dict, Optional, List, Any
from datetime import datetime, timezone
import numpy as np

logger = logging.getLogger(__name__)


class StepRecorder:
    """Collects per-step rows and writes them out in several formats."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.rows: List[Dict] = []
        self._metadata = {
            'created_at': datetime.now(timezone.utc).isoformat(),
            'algorithm': None,
            'deadline': None
        }

    def set_metadata(self, **kwargs):
        """Set metadata that will be included in recordings."""
        self._metadata.update(kwargs)

    @property
    def metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)

    def log(self, row: Dict):
        """Log a dictionary row with automatic type conversion."""
        if not self.enabled:
            return

        clean_row = {'timestamp': datetime.now(timezone.utc).isoformat()}

        for k, v in row.items():
            if isinstance(v, (bool, np.bool_)):
                clean_row[k] = bool(v)
            elif isinstance(v, (int, float, np.number)):
                clean_row[k] = float(v)
            elif isinstance(v, np.ndarray):
                if v.size == 1:
                    clean_row[k] = float(v.item())
                else:
                    clean_row[k] = v.tolist()
            elif isinstance(v, (list, tuple)):
                clean_row[k] = list(v)
            elif v is None:
                clean_row[k] = None
            else:
                clean_row[k] = str(v)

        self.rows.append(clean_row)

    def _fieldnames(self) -> List[str]:
        keys = set()
        for row in self.rows:
            keys.update(row.keys())
        return sorted(keys)

    def dump_csv(self, path: str) -> Optional[str]:
        """Dump rows to CSV; list values are written as their string form."""
        if not self.enabled or not self.rows:
            return None

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        csv_rows = []
        for row in self.rows:
            csv_rows.append({k: str(v) if isinstance(v, list) else v for k, v in row.items()})

        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self._fieldnames())
            writer.writeheader()
            writer.writerows(csv_rows)
        logger.info(f"Saved {len(csv_rows)} rows to CSV: {path}")
        return path

    def dump_jsonl(self, path: str) -> Optional[str]:
        """Dump to JSONL, metadata first, then one row per line."""
        if not self.enabled or not self.rows:
            return None

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        with open(path, 'w') as f:
            f.write(json.dumps({'_metadata': self._metadata}) + '\n')
            for row in self.rows:
                f.write(json.dumps(row) + '\n')

        logger.info(f"Saved {len(self.rows)} rows to JSONL: {path}")
        return path

    def dump_parquet(self, path: str) -> Optional[str]:
        """Dump to Parquet; needs the ``recording`` extra (pandas, pyarrow)."""
        if not self.enabled or not self.rows:
            return None

        try:
            import pandas as pd
            import pyarrow as pa
            import pyarrow.parquet as pq
        except ImportError:
            logger.warning("pandas/pyarrow not available, skipping Parquet export")
            return None

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        df_rows = []
        for row in self.rows:
            df_rows.append({k: str(v) if isinstance(v, list) else v for k, v in row.items()})

        df = pd.DataFrame(df_rows)
        table = pa.Table.from_pandas(df)
        table = table.replace_schema_metadata({'metadata': json.dumps(self._metadata)})

        pq.write_table(table, path)
        logger.info(f"Saved {len(df)} rows to Parquet: {path}")
        return path

    def dump_all_formats(self, base_path: str) -> List[str]:
        """Dump to every supported format next to ``base_path``."""
        base_dir = os.path.dirname(base_path)
        base_name = os.path.splitext(os.path.basename(base_path))[0]

        written = [
            self.dump_csv(os.path.join(base_dir, f"{base_name}.csv")),
            self.dump_jsonl(os.path.join(base_dir, f"{base_name}.jsonl")),
            self.dump_parquet(os.path.join(base_dir, f"{base_name}.parquet")),
        ]
        return [p for p in written if p is not None]

    def clear(self):
        """Clear all logged rows."""
        self.rows.clear()

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics of logged data."""
        if not self.rows:
            return {'row_count': 0}

        summary = {
            'row_count': len(self.rows),
            'first_timestamp': self.rows[0].get('timestamp'),
            'last_timestamp': self.rows[-1].get('timestamp'),
            'columns': self._fieldnames()
        }

        # bools are flags, not measurements
        numeric_cols: Dict[str, List[float]] = {}
        for row in self.rows:
            for k, v in row.items():
                if isinstance(v, (int, float)) and not isinstance(v, bool):
                    numeric_cols.setdefault(k, []).append(v)

        summary['numeric_stats'] = {}
        for col, values in numeric_cols.items():
            arr = np.asarray(values, dtype=float)
            summary['numeric_stats'][col] = {
                'count': int(arr.size),
                'mean': float(np.mean(arr)),
                'std': float(np.std(arr)),
                'min': float(np.min(arr)),
                'max': float(np.max(arr))
            }

        return summary
