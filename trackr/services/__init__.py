"""Сервисный слой: права доступа и операции над адресами."""
