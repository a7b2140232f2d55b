"""awareness_scout.signals: модель сигналов, детекторы и экстрактор."""

from awareness_scout.signals.extractor import extract_signals
from awareness_scout.signals.models import AwarenessSignals

__all__ = ["AwarenessSignals", "extract_signals"]
