# polybench

The PolyBench collection of numerical kernels, written in pure Python, each
with a timing harness. Every kernel sets up its input the PolyBench way and
then times one run of the computation.

The kernels are grouped as follows:

| Group | Kernels |
|-------|---------|
| `polybench.datamining` | `correlation`, `covariance` |
| `polybench.linear_algebra.blas` | `gemm`, `gemver`, `gesummv`, `symm`, `syr2k`, `syrk`, `trmm` |
| `polybench.linear_algebra.kernels` | `two_mm`, `three_mm`, `atax`, `bicg`, `doitgen`, `mvt` |
| `polybench.linear_algebra.solvers` | `cholesky`, `durbin`, `gramschmidt`, `lu`, `ludcmp`, `trisolv` |
| `polybench.medley` | `deriche`, `floyd_warshall`, `nussinov` |
| `polybench.stencils` | `adi`, `fdtd_2d`, `heat_3d`, `jacobi_1d`, `jacobi_2d`, `seidel_2d` |

## Installation

```
pip install .
```

To run the test suite, install the extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

The `polybench` command runs the named benchmarks (all of them when no name
is given) at the three problem sizes each one defines. For every run it
prints one line with the name, the dimensions and the elapsed time in
seconds:

```
polybench gemm
polybench gemm syrk
```

Benchmark names on the command line are `2mm` and `3mm` for the two- and
three-multiplication kernels, and the module names for the rest.

`--dims` replaces the default sizes with one comma separated set of
dimensions. The count must match what every named benchmark takes, and
each dimension must be positive:

```
polybench gemm --dims 10,11,12
polybench jacobi_2d seidel_2d --dims 100,20
```

The pure-Python kernels are slow at the default sizes; a full run can take
a long time.

## Library use

Each kernel module has three functions:

- `init_array(...)` builds the initial data and returns it.
- `kernel_<name>(...)` runs the computation, on the arrays in place or
  returning a new result, as its docstring says.
- `bench(...)` does both and returns the seconds the kernel took.

```python
from polybench.linear_algebra.blas import gemm

elapsed = gemm.bench(10, 11, 12)

alpha, beta, c, a, b = gemm.init_array(10, 11, 12)
gemm.kernel_gemm(10, 11, 12, alpha, beta, c, a, b)  # c = alpha * a @ b + beta * c
```

`bench` takes the dimensions of the problem it sets up, for example
`gemm.bench(ni, nj, nk)`, `jacobi_2d.bench(n, tsteps)`,
`floyd_warshall.bench(n)`, `deriche.bench(h, w)` and
`doitgen.bench(np, nq, nr)`.

Arrays are nested Python lists. The helpers shared by all kernels are:

- `polybench.ndarray`: `zeros(shape, fill=0.0)`, `array_nbytes(shape, itemsize)`,
  `make_positive_semi_definite(a)` (replaces `a` by `a @ a.T`) and
  `format_array(a)` (renders `[x, y, ...]`).
- `polybench.util`: `time_function(func)`, which clears a 32 MiB buffer
  before timing one call, and `consume(value, echo=False)`.
- `polybench.config`: `data_type(name)` and the `DataType` enum giving the
  element type each kernel works in. Most kernels use 64-bit floats;
  `deriche` rounds to 32-bit floats and `floyd_warshall` and `nussinov`
  use integers.
- `polybench.cli`: `main(argv=None)`, `bench_and_print(name, dims)` and
  `format_result(name, dims, elapsed)`.

## What it does not do

The command prints timings only. It has no option to print or check the
computed arrays; call `consume(value, echo=True)` or `format_array` on a
kernel's result to see it.