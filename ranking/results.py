"""Write ranked results as the 7-column CSV."""

import csv
from pathlib import Path

from ranking.models import Result

CSV_HEADERS = ["Rank", "Candidate", "Score", "Strengths", "Weaknesses", "Explanation", "File"]


def write_results_csv(output_path: Path, results: list[Result]) -> None:
    """Create parent dirs and overwrite output_path. OSError propagates."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADERS)
        for r in results:
            writer.writerow([
                r.rank,
                r.candidate,
                f"{r.score:.2f}",
                r.strengths,
                r.weaknesses,
                r.explanation,
                r.file,
            ])
