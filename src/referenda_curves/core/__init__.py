"""Core: арифметика фиксированной точки, доменные модели и контракты."""
