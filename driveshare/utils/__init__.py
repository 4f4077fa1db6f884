"""
Вспомогательные модули: ошибки, кэш, константы, даты
"""
