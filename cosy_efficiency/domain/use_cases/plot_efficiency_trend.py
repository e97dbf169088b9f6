"""Use case for charting daily normalised efficiency over time."""

import logging
import os
from typing import List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..entities.daily_record import EnrichedRecord

logger = logging.getLogger(__name__)


class PlotEfficiencyTrendUseCase:
    """Scatter daily kWh per HDD, baseline days and change days in separate series."""

    def __init__(self, figsize=(10, 5)):
        self.figsize = figsize

    def execute(self, records: List[EnrichedRecord], output_file: str) -> str:
        """
        Render the chart to a PNG file.

        Days with HDD = 0 have no normalised efficiency and are left out.

        Args:
            records: Enriched records to plot
            output_file: Target image path

        Returns:
            The written path
        """
        analysable = [r for r in records if r.normalised_efficiency is not None]
        baseline = [r for r in analysable if not r.change_active]
        change = [r for r in analysable if r.change_active]
        logger.info(
            f"Plotting {len(analysable)} analysable days "
            f"({len(baseline)} baseline, {len(change)} change)"
        )

        fig, ax = plt.subplots(figsize=self.figsize)
        for series, label, color in [
            (baseline, "Baseline", "tab:blue"),
            (change, "Change active", "tab:orange"),
        ]:
            if series:
                ax.scatter(
                    [r.date for r in series],
                    [float(r.normalised_efficiency) for r in series],
                    label=label,
                    color=color,
                    s=18,
                )
        ax.set_xlabel("Date")
        ax.set_ylabel("kWh per heating degree day")
        ax.set_title("Heat pump normalised efficiency (lower is better)")
        if analysable:
            ax.legend()
        fig.autofmt_xdate()

        directory = os.path.dirname(output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(output_file)
        plt.close(fig)
        logger.info(f"Efficiency chart saved → {output_file}")
        return output_file
