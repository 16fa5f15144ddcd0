"""Linear-algebra kernels: BLAS routines, composite kernels and solvers."""