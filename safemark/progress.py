"""per-document reporting for batch rendering."""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)
from rich.table import Table


@dataclass
class DocumentReport:
    """outcome of rendering one markdown document."""

    name: str
    source_bytes: int
    html_bytes: int = 0
    error: Optional[str] = None

    @property
    def rendered(self) -> bool:
        """True when the document produced sanitized HTML."""
        return self.error is None


class RenderReporter:
    """collects document reports, drives the progress bar and prints a summary."""

    def __init__(self, quiet: bool = False, show_progress: bool = False) -> None:
        self.quiet = quiet
        self.show_progress = show_progress
        self.reports: list[DocumentReport] = []
        self._console = Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def __enter__(self) -> "RenderReporter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._stop()

    @property
    def rendered(self) -> int:
        return sum(1 for report in self.reports if report.rendered)

    @property
    def failed(self) -> int:
        return len(self.reports) - self.rendered

    def begin(self, total: int) -> None:
        """starts the progress bar for ``total`` documents."""
        if not self.show_progress:
            return

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("Rendering"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("{task.fields[document]}"),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("render", total=total, document="")

    def record(self, report: DocumentReport) -> None:
        """
        stores a document outcome and advances the progress bar.

        Failures are printed immediately, even in quiet mode.

        Args:
            report: outcome of one document
        """
        self.reports.append(report)
        if not report.rendered:
            self._console.print(f"[red]ERROR:[/red] {report.name}: {report.error}")
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, advance=1, document=report.name)

    def log_info(self, message: str) -> None:
        """prints info message (only when not quiet and progress disabled)."""
        if self.quiet or self.show_progress:
            return

        self._console.print(message)

    def summary(self) -> Table:
        """builds a table with one row per document."""
        table = Table(title="Rendered documents")
        table.add_column("Document", style="cyan")
        table.add_column("Markdown", justify="right")
        table.add_column("HTML", justify="right")
        table.add_column("Status")

        for report in self.reports:
            status = "[green]ok[/green]" if report.rendered else "[red]failed[/red]"
            html_size = f"{report.html_bytes} B" if report.rendered else "-"
            table.add_row(report.name, f"{report.source_bytes} B", html_size, status)
        return table

    def finish(self) -> None:
        """stops progress and prints the summary unless quiet."""
        self._stop()

        if self.quiet:
            return

        if self.reports:
            self._console.print(self.summary())
        self._console.print(
            f"Processed {len(self.reports)} document(s): "
            f"{self.rendered} rendered, {self.failed} failed"
        )

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
