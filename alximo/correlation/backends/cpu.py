"""
CPU reference backend for correlation and covariance.

Dispatches to kind-specific submodules based on design.kind.
"""

from __future__ import annotations

from alximo.core.result import Result
from alximo.core.compute.timing import Timer
from alximo.correlation._common import CovarianceParams, PearsonParams
from alximo.correlation.design import CorrelationDesign


class CPUCorrelationBackend:
    """CPU reference backend for correlation and covariance."""

    @property
    def name(self) -> str:
        return 'cpu_correlation'

    def solve(
        self, design: CorrelationDesign,
    ) -> Result[PearsonParams] | Result[CovarianceParams]:
        """Dispatch on design.kind: 'pearson', 'covariance' or 'corrcoef'."""
        timer = Timer()
        timer.start()

        kind = design.kind
        warnings_list: list[str] = []
        info = {'kind': kind}

        if kind == 'pearson':
            from alximo.correlation.backends._pearson import pearson
            with timer.section('pearson'):
                params = pearson(design)

        elif kind in ('covariance', 'corrcoef'):
            from alximo.correlation.backends._covariance import (
                covariance, normalize_covariance,
            )
            with timer.section('covariance'):
                cov_mat = covariance(design)

            cor_mat = None
            shape_kind = None
            if kind == 'corrcoef':
                with timer.section('normalize'):
                    cor_mat, shape_kind = normalize_covariance(cov_mat)
                info['shape_kind'] = shape_kind

            info['ddof'] = design.ddof
            params = CovarianceParams(
                covariance_matrix=cov_mat,
                ddof=design.ddof,
                n_observations=design.n_observations,
                n_variables=design.n_variables,
                correlation_matrix=cor_mat,
                shape_kind=shape_kind,
            )

        else:
            raise ValueError(f"Unknown design kind: {kind!r}")

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
