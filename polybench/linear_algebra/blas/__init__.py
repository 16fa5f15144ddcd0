"""BLAS-style kernels: gemm, gemver, gesummv, symm, syr2k, syrk and trmm."""