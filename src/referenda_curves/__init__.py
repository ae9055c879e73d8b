"""
referenda-curves — кривые порогов approval / support для governance треков

Точное вычисление кривых в фиксированной точке, их дискретизация по окну
решения, поиск точек пересечения с каталогом порогов и экспорт (CSV, PNG).
"""

__version__ = "0.1.0"
