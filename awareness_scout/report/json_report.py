# awareness_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта AwarenessScout.

Сериализация AnalysisResult в файл.
"""
from __future__ import annotations

import json
from pathlib import Path

from awareness_scout.engine import AnalysisResult


def render_json(
    result: AnalysisResult, output_path: Path | str, *, include_markup: bool = False
) -> Path:
    """
    Сохраняет результат анализа в формате JSON по указанному пути.

    :param result: объект AnalysisResult
    :param output_path: путь к JSON-файлу
    :param include_markup: добавить сырую разметку страниц
    :return: Path сохранённого файла

    Пример:
    ```python
    from awareness_scout.report.json_report import render_json
    report_path = render_json(result, 'reports/example.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8") as f:
        json.dump(result.to_dict(include_markup=include_markup), f, ensure_ascii=False, indent=2)

    return output
