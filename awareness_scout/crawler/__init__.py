"""awareness_scout.crawler: загрузка главной страницы и подстраниц."""
