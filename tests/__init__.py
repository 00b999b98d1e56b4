"""
Тестовый набор homotopy

Содержит:
- tests/unit/          : Unit тесты примитивов, комбинаторов, граней,
                         предикатов проверки и контрактов конфигурации
"""
