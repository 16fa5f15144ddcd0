"""Command line front end that times the benchmark kernels."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Sequence

from .datamining import correlation, covariance
from .linear_algebra.blas import gemm, gemver, gesummv, symm, syr2k, syrk, trmm
from .linear_algebra.kernels import atax, bicg, doitgen, mvt, three_mm, two_mm
from .linear_algebra.solvers import cholesky, durbin, gramschmidt, lu, ludcmp, trisolv
from .medley import deriche, floyd_warshall, nussinov
from .stencils import adi, fdtd_2d, heat_3d, jacobi_1d, jacobi_2d, seidel_2d

__all__ = ["format_result", "bench_and_print", "main"]


@dataclass(frozen=True)
class _Benchmark:
    run: Callable[..., float]
    sizes: tuple[tuple[int, ...], ...]

    @property
    def arity(self) -> int:
        return len(self.sizes[0])


_BENCHMARKS: dict[str, _Benchmark] = {
    "2mm": _Benchmark(
        two_mm.bench,
        ((200, 225, 250, 275), (400, 450, 500, 550), (800, 900, 1000, 1100)),
    ),
    "3mm": _Benchmark(
        three_mm.bench,
        (
            (200, 225, 250, 275, 300),
            (400, 450, 500, 550, 600),
            (800, 900, 1000, 1100, 1200),
        ),
    ),
    "adi": _Benchmark(adi.bench, ((250, 125), (500, 250), (1000, 500))),
    "atax": _Benchmark(atax.bench, ((475, 525), (950, 1050), (1900, 2100))),
    "bicg": _Benchmark(bicg.bench, ((475, 525), (950, 1050), (1900, 2100))),
    "cholesky": _Benchmark(cholesky.bench, ((500,), (1000,), (2000,))),
    "correlation": _Benchmark(
        correlation.bench, ((300, 350), (600, 700), (1200, 1400))
    ),
    "covariance": _Benchmark(
        covariance.bench, ((300, 350), (600, 700), (1200, 1400))
    ),
    "deriche": _Benchmark(
        deriche.bench, ((1024, 540), (2048, 1080), (4096, 2160))
    ),
    "doitgen": _Benchmark(
        doitgen.bench, ((35, 37, 40), (70, 75, 80), (140, 150, 160))
    ),
    "durbin": _Benchmark(durbin.bench, ((500,), (1000,), (2000,))),
    "fdtd_2d": _Benchmark(
        fdtd_2d.bench, ((250, 300, 125), (500, 600, 250), (1000, 1200, 500))
    ),
    "floyd_warshall": _Benchmark(floyd_warshall.bench, ((500,), (1000,), (2000,))),
    "gemm": _Benchmark(
        gemm.bench, ((250, 275, 300), (500, 550, 600), (1000, 1100, 1200))
    ),
    "gemver": _Benchmark(gemver.bench, ((5000,), (10000,), (20000,))),
    "gesummv": _Benchmark(gesummv.bench, ((5000,), (10000,), (20000,))),
    "gramschmidt": _Benchmark(
        gramschmidt.bench, ((250, 300), (500, 600), (1000, 1200))
    ),
    "heat_3d": _Benchmark(heat_3d.bench, ((30, 125), (60, 250), (120, 500))),
    "jacobi_1d": _Benchmark(
        jacobi_1d.bench, ((5000, 125), (10000, 250), (20000, 500))
    ),
    "jacobi_2d": _Benchmark(jacobi_2d.bench, ((325, 125), (650, 250), (1300, 500))),
    "lu": _Benchmark(lu.bench, ((500,), (1000,), (2000,))),
    "ludcmp": _Benchmark(ludcmp.bench, ((500,), (1000,), (2000,))),
    "mvt": _Benchmark(mvt.bench, ((1000,), (2000,), (4000,))),
    "nussinov": _Benchmark(nussinov.bench, ((500,), (1000,), (2000,))),
    "seidel_2d": _Benchmark(seidel_2d.bench, ((500, 125), (1000, 250), (2000, 500))),
    "symm": _Benchmark(symm.bench, ((250, 300), (500, 600), (1000, 1200))),
    "syr2k": _Benchmark(syr2k.bench, ((250, 300), (500, 600), (1000, 1200))),
    "syrk": _Benchmark(syrk.bench, ((250, 300), (500, 600), (1000, 1200))),
    "trisolv": _Benchmark(trisolv.bench, ((500,), (1000,), (2000,))),
    "trmm": _Benchmark(trmm.bench, ((250, 300), (500, 600), (1000, 1200))),
}


def _format_dims(dims) -> str:
    dims = tuple(dims)
    if len(dims) == 1:
        return str(dims[0])
    return "(" + ", ".join(str(d) for d in dims) + ")"


def format_result(name, dims, elapsed) -> str:
    """Render one result line: name, dimensions and seconds elapsed."""
    return f"{name:<14} | {_format_dims(dims):<30} | {elapsed:.7f} s"


def bench_and_print(name, dims) -> float:
    """Run the named benchmark with ``dims``, print its line and return the seconds."""
    try:
        benchmark = _BENCHMARKS[name]
    except KeyError:
        raise ValueError(f"unknown benchmark: {name!r}") from None
    dims = tuple(dims)
    if len(dims) != benchmark.arity:
        raise ValueError(
            f"{name} takes {benchmark.arity} dimension(s), got {len(dims)}"
        )
    if any(d < 1 for d in dims):
        raise ValueError("dimensions must be positive")
    elapsed = benchmark.run(*dims)
    print(format_result(name, dims, elapsed))
    return elapsed


def _parse_dims(text: str) -> tuple[int, ...]:
    try:
        dims = tuple(int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"dimensions must be comma separated integers: {text!r}"
        ) from None
    if any(d < 1 for d in dims):
        raise argparse.ArgumentTypeError("dimensions must be positive")
    return dims


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polybench",
        description="Time polyhedral benchmark kernels.",
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        choices=sorted(_BENCHMARKS),
        help="benchmarks to run (default: all)",
    )
    parser.add_argument(
        "--dims",
        type=_parse_dims,
        help="comma separated dimensions to use instead of the default sizes",
    )
    return parser


def main(argv=None) -> int:
    """Run the selected benchmarks and print one line per run."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    names = args.names or list(_BENCHMARKS)

    if args.dims is not None:
        for name in names:
            arity = _BENCHMARKS[name].arity
            if len(args.dims) != arity:
                parser.error(
                    f"{name} takes {arity} dimension(s), got {len(args.dims)}"
                )

    for name in names:
        sizes = (args.dims,) if args.dims is not None else _BENCHMARKS[name].sizes
        for dims in sizes:
            bench_and_print(name, dims)
    return 0