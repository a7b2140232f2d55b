"""awareness_scout.report: сохранение результатов анализа (JSON)."""

from awareness_scout.report.json_report import render_json

__all__ = ["render_json"]
