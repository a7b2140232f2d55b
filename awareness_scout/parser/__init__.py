"""awareness_scout.parser: разбор HTML в представление для детекторов."""
