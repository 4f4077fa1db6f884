"""
Слой хранения: соединение с SQLite, схемы таблиц и репозитории
"""
