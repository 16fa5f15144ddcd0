"""Solvers and decompositions: cholesky, durbin, gramschmidt, lu, ludcmp and trisolv."""