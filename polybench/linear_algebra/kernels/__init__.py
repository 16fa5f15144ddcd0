"""Composite linear-algebra kernels: two_mm, three_mm, atax, bicg, doitgen and mvt."""