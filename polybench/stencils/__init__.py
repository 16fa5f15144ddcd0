"""Stencil kernels: adi, fdtd_2d, heat_3d, jacobi_1d, jacobi_2d and seidel_2d."""