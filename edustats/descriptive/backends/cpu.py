"""
CPU reference backend for descriptive statistics.

Raw data uses the textbook definitions directly. Grouped data works from
class midpoints and interpolates the median and mode inside the median
class and modal class.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from edustats.core.exceptions import ValidationError
from edustats.core.result import Result
from edustats.core.compute.timing import Timer
from edustats.descriptive.design import DescriptiveDesign, variance_denominator
from edustats.descriptive.solution import DescriptiveParams, Statistic


def _coefficient_of_variation(sd: float, mean: float) -> float:
    """CV in percent; defined as 0 at mean 0 instead of undefined."""
    if mean == 0:
        return 0.0
    return sd / abs(mean) * 100.0


def _check_finite(value: float, what: str) -> None:
    if not np.isfinite(value):
        raise ValidationError(
            f"{what} exceeds the floating-point range; rescale the data"
        )


def _pearson_skewness(mean: float, median: float, sd: float) -> float:
    if sd == 0:
        return 0.0
    return 3.0 * (mean - median) / sd


def raw_mode(values: NDArray[np.floating[Any]]) -> tuple[tuple[float, ...], int]:
    """
    Mode value(s) of a sample and the maximal frequency.

    No mode when every value occurs once or when all distinct values share
    the same frequency. Ties are all reported, in ascending order.
    """
    distinct, counts = np.unique(values, return_counts=True)
    max_freq = int(counts.max())
    if max_freq <= 1 or np.all(counts == max_freq):
        return (), max_freq
    return tuple(float(v) for v in distinct[counts == max_freq]), max_freq


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """
        Compute all descriptive statistics for a raw or grouped design.

        Raises
        ------
        InsufficientDataError
            If the sample variance is requested with fewer than 2 observations.
        ValidationError
            If a sum or the range exceeds the floating-point range.
        """
        timer = Timer().start()

        denominator, is_sample = variance_denominator(design.n, design.is_sample)

        if design.kind == 'grouped':
            params, info = self._solve_grouped(design, denominator, is_sample, timer)
        else:
            params, info = self._solve_raw(design, denominator, is_sample, timer)

        timer.stop()

        info.update({
            'kind': design.kind,
            'n': design.n,
            'is_sample': is_sample,
            'denominator': denominator,
        })

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=f'{self.name}_{design.kind}',
        )

    # --- Raw data ---

    def _solve_raw(
        self,
        design: DescriptiveDesign,
        denominator: int,
        is_sample: bool,
        timer: Timer,
    ) -> tuple[DescriptiveParams, dict[str, Any]]:
        x = design.values
        n = x.shape[0]

        with timer.section('sort'):
            ordered = np.sort(x)

        with timer.section('center'), np.errstate(over='ignore'):
            total = float(np.sum(x))
            _check_finite(total, "sum of the sample")
            mean = total / n
            if n % 2 == 0:
                # Halved first: the sum of the middle values may overflow
                median = ordered[n // 2 - 1] / 2 + ordered[n // 2] / 2
            else:
                median = ordered[n // 2]
            median = float(median)
            mode, max_freq = raw_mode(x)

        with timer.section('dispersion'), np.errstate(over='ignore'):
            ss = float(np.sum((x - mean) ** 2))
            _check_finite(ss, "sum of squared deviations")
            variance = ss / denominator
            sd = float(np.sqrt(variance))
            lo, hi = float(ordered[0]), float(ordered[-1])
            spread = hi - lo
            _check_finite(spread, "range")
            cv = _coefficient_of_variation(sd, mean)
            skew = _pearson_skewness(mean, median, sd)

        sym_var = "s²" if is_sample else "σ²"
        sym_sd = "s" if is_sample else "σ"
        den_text = "(n-1)" if is_sample else "n"

        params = DescriptiveParams(
            mean=Statistic(
                mean, "x̄ = Σx / n", f"{total:.2f} / {n} = {mean:.3f}",
            ),
            median=Statistic(
                median,
                "middle value of the sorted data",
                f"position {(n + 1) / 2:g} of {n}",
            ),
            mode=Statistic(
                mode, "value(s) with the highest frequency", f"highest frequency: {max_freq}",
            ),
            variance=Statistic(
                variance,
                f"{sym_var} = Σ(x - x̄)² / {den_text}",
                f"{ss:.2f} / {denominator} = {variance:.3f}",
            ),
            sd=Statistic(
                sd, f"{sym_sd} = √{sym_var}", f"√{variance:.3f} = {sd:.3f}",
            ),
            range=Statistic(
                spread, "R = max(x) - min(x)", f"{hi:g} - {lo:g} = {spread:g}",
            ),
            cv=Statistic(
                cv,
                f"CV = ({sym_sd} / |x̄|) × 100",
                f"({sd:.3f} / |{mean:.3f}|) × 100 = {cv:.2f}%",
            ),
            skewness=Statistic(
                skew,
                f"Sk = 3(x̄ - median) / {sym_sd}",
                f"3({mean:.3f} - {median:.3f}) / {sd:.3f} = {skew:.3f}",
            ),
            count=n,
            minimum=lo,
            maximum=hi,
            is_sample=is_sample,
            denominator=denominator,
        )
        info = {'sum': total, 'sum_squared_deviations': ss, 'max_frequency': max_freq}
        return params, info

    # --- Grouped data ---

    def _solve_grouped(
        self,
        design: DescriptiveDesign,
        denominator: int,
        is_sample: bool,
        timer: Timer,
    ) -> tuple[DescriptiveParams, dict[str, Any]]:
        lower = design.lower
        upper = design.upper
        f = design.frequencies
        xi = design.midpoints
        n = design.n

        with timer.section('cumulative'):
            cumulative = np.cumsum(f)

        with timer.section('center'), np.errstate(over='ignore'):
            sum_fx = float(np.sum(f * xi))
            _check_finite(sum_fx, "sum of frequency times midpoint")
            mean = sum_fx / n

            # Median class: first class whose cumulative frequency reaches n/2
            half = n / 2
            m = int(np.argmax(cumulative >= half))
            l_med = float(lower[m])
            f_prev = int(cumulative[m - 1]) if m > 0 else 0
            f_med = int(f[m])
            w_med = float(upper[m] - lower[m])
            if f_med > 0:
                median = l_med + ((half - f_prev) / f_med) * w_med
            else:
                median = l_med

            # Modal class: first class with the highest frequency
            k = int(np.argmax(f))
            l_mode = float(lower[k])
            w_mode = float(upper[k] - lower[k])
            d1 = int(f[k]) - (int(f[k - 1]) if k > 0 else 0)
            d2 = int(f[k]) - (int(f[k + 1]) if k + 1 < len(f) else 0)
            if d1 + d2 > 0:
                mode = l_mode + (d1 / (d1 + d2)) * w_mode
            else:
                mode = l_mode

        with timer.section('dispersion'), np.errstate(over='ignore'):
            ss = float(np.sum(f * (xi - mean) ** 2))
            _check_finite(ss, "sum of squared deviations")
            variance = ss / denominator
            sd = float(np.sqrt(variance))
            lo, hi = float(lower.min()), float(upper.max())
            spread = hi - lo
            _check_finite(spread, "range")
            cv = _coefficient_of_variation(sd, mean)
            skew = _pearson_skewness(mean, median, sd)

        sym_var = "s²" if is_sample else "σ²"
        sym_sd = "s" if is_sample else "σ"
        den_text = "(n-1)" if is_sample else "n"

        params = DescriptiveParams(
            mean=Statistic(
                mean, "x̄ = Σ(fᵢxᵢ) / n", f"{sum_fx:.2f} / {n} = {mean:.3f}",
            ),
            median=Statistic(
                median,
                "Me = L + [(n/2 - F) / f] × w",
                f"{l_med:g} + [({half:g} - {f_prev}) / {f_med}] × {w_med:g} = {median:.3f}",
            ),
            mode=Statistic(
                (float(mode),),
                "Mo = L + [d₁ / (d₁ + d₂)] × w",
                f"{l_mode:g} + [{d1} / ({d1} + {d2})] × {w_mode:g} = {mode:.3f}",
            ),
            variance=Statistic(
                variance,
                f"{sym_var} = Σfᵢ(xᵢ - x̄)² / {den_text}",
                f"{ss:.2f} / {denominator} = {variance:.3f}",
            ),
            sd=Statistic(
                sd, f"{sym_sd} = √{sym_var}", f"√{variance:.3f} = {sd:.3f}",
            ),
            range=Statistic(
                spread, "R = max(upper) - min(lower)", f"{hi:g} - {lo:g} = {spread:g}",
            ),
            cv=Statistic(
                cv,
                f"CV = ({sym_sd} / |x̄|) × 100",
                f"({sd:.3f} / |{mean:.3f}|) × 100 = {cv:.2f}%",
            ),
            skewness=Statistic(
                skew,
                f"Sk = 3(x̄ - Me) / {sym_sd}",
                f"3({mean:.3f} - {median:.3f}) / {sd:.3f} = {skew:.3f}",
            ),
            count=n,
            minimum=lo,
            maximum=hi,
            is_sample=is_sample,
            denominator=denominator,
        )
        info = {
            'sum': sum_fx,
            'sum_squared_deviations': ss,
            'median_class': m,
            'modal_class': k,
            'cumulative_frequencies': tuple(int(c) for c in cumulative),
        }
        return params, info
