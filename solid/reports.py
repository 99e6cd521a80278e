# solid/reports.py
from solid.interfaces import IReportGenerator
import config


# --- Low-level modules ---

class PDFGenerator(IReportGenerator):
    def generate(self, content: str) -> None:
        print(f"Generating PDF with content: {content}")


class HTMLGenerator(IReportGenerator):
    def generate(self, content: str) -> None:
        print(f"Generating HTML with content: {content}")


# --- High-level module ---

class ReportService:
    """
    [DIP] Business logic depending only on IReportGenerator.
    The concrete generator is injected by the caller.
    """
    def __init__(self, generator: IReportGenerator):
        self.generator = generator

    def create_report(self) -> None:
        content = config.REPORT_CONTENT
        self.generator.generate(content)
