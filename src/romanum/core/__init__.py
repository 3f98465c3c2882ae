"""
Core domain models and conversion algorithms.

Модули не зависят от ввода-вывода: только чистые функции и value objects.
"""
