"""
PDF report generation for a finished admission run.

This module defines the ``ReportGenerator`` class which produces a
human-readable PDF summary of an enrolment: the run parameters, the
per-department statistics table, a chart of admissions per wave, every
department roster and the applicants left unplaced.

The ``fpdf2`` library is used to construct the PDF document and
``matplotlib`` to draw the admissions chart which is embedded as an
image in the report.
"""

from __future__ import annotations

import datetime
import os
import tempfile
from pathlib import Path
from typing import List, Union

import matplotlib
from fpdf import FPDF
from fpdf.enums import XPos, YPos
from fpdf.errors import FPDFException
from matplotlib.figure import Figure

from university_admission.enrolment import DepartmentsEnrolment
from university_admission.errors import OutputWriteError
from university_admission.logger import logger
from university_admission.models import WAVE_ORDER

# TrueType fonts shipped with matplotlib; the PDF core fonts stop at Latin-1
FONT = 'DejaVu'
_FONT_DIR = Path(matplotlib.get_data_path()) / 'fonts' / 'ttf'
FONT_FILES = {
    '': _FONT_DIR / 'DejaVuSans.ttf',
    'B': _FONT_DIR / 'DejaVuSans-Bold.ttf',
}


class ReportGenerator:
    """Generate PDF reports summarising an enrolment."""

    def __init__(self, enrolment: DepartmentsEnrolment) -> None:
        self.enrolment = enrolment

    def _create_admissions_plot(self, output_path: str) -> None:
        """Create a stacked bar chart of admissions per department and wave.

        The plot is saved to ``output_path`` as a PNG file.
        """
        stats = self.enrolment.statistics()
        wave_columns = [c for c in stats.columns if c.startswith('Wave')]
        fig = Figure()
        ax = fig.subplots()
        if not wave_columns:
            ax.set_title("No waves have been run")
            fig.savefig(output_path)
            return
        bottom = [0] * len(stats.index)
        for column in wave_columns:
            values = stats[column].tolist()
            ax.bar(stats.index, values, bottom=bottom, label=column.replace('Wave', 'Wave '))
            bottom = [b + v for b, v in zip(bottom, values)]
        ax.axhline(self.enrolment.capacity, color='grey', linestyle='--', label='Capacity')
        ax.set_xlabel('Department')
        ax.set_ylabel('Admitted applicants')
        ax.set_title('Admissions per wave')
        ax.legend()
        fig.tight_layout()
        fig.savefig(output_path)

    def _line(self, pdf: FPDF, height: float, text: str, **kwargs) -> None:
        pdf.cell(0, height, text, new_x=XPos.LMARGIN, new_y=YPos.NEXT, **kwargs)

    def _new_document(self) -> FPDF:
        pdf = FPDF()
        pdf.set_auto_page_break(auto=True, margin=15)
        for style, path in FONT_FILES.items():
            pdf.add_font(FONT, style, str(path))
        return pdf

    def _build(self, plot_path: str) -> FPDF:
        """Lay out every page of the report."""
        enrolment = self.enrolment
        stats = enrolment.statistics()
        pdf = self._new_document()

        # First page: summary
        pdf.add_page()
        pdf.set_font(FONT, 'B', 16)
        self._line(pdf, 10, 'Admission Report', align='C')
        pdf.ln(4)
        pdf.set_font(FONT, '', 12)
        now_str = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._line(pdf, 8, f'Report generated: {now_str}')
        self._line(pdf, 8, f'Seats per department: {enrolment.capacity}')
        self._line(pdf, 8, f'Waves run: {enrolment.waves_run}')
        self._line(pdf, 8, f'Admitted: {len(enrolment.admissions)}, unplaced: {len(enrolment.pool)}')
        pdf.ln(4)

        # Statistics table
        headers: List[str] = ['Department', *stats.columns]
        table_width = pdf.w - 2 * pdf.l_margin
        col_width = table_width / len(headers)
        pdf.set_font(FONT, 'B', 9)
        for h in headers:
            pdf.cell(col_width, 6, h, border=1, align='C')
        pdf.ln()
        pdf.set_font(FONT, '', 9)
        for department_name, row in stats.iterrows():
            cells = [str(department_name)]
            for column in stats.columns:
                value = row[column]
                cells.append(f'{value:.2f}' if isinstance(value, float) else str(value))
            for cell in cells:
                pdf.cell(col_width, 6, cell, border=1, align='C')
            pdf.ln()
        pdf.ln(4)

        # Admissions chart, fitted to the page width
        pdf.image(plot_path, x=pdf.l_margin, w=table_width)

        # Second page: rosters
        pdf.add_page()
        pdf.set_font(FONT, 'B', 14)
        self._line(pdf, 10, 'Department rosters')
        pdf.ln(4)
        for department in WAVE_ORDER:
            roster = enrolment.roster(department)
            pdf.set_font(FONT, 'B', 12)
            self._line(pdf, 8, f'{department.display_name} (admitted: {len(roster)})')
            pdf.set_font(FONT, '', 10)
            if roster:
                for applicant in roster:
                    self._line(pdf, 5, f'{applicant.full_name} {applicant.score_for(department):.2f}')
            else:
                self._line(pdf, 5, 'No admitted applicants')
            pdf.ln(2)

        # Third page: unplaced applicants with the preferences as written
        # in the applicant file, unknown department names included
        pdf.add_page()
        pdf.set_font(FONT, 'B', 14)
        self._line(pdf, 10, 'Unplaced applicants')
        pdf.ln(4)
        pdf.set_font(FONT, '', 10)
        unplaced = enrolment.unplaced()
        if not unplaced:
            self._line(pdf, 5, 'Every applicant was admitted')
        for applicant in unplaced:
            preferences = ', '.join(applicant.preference_names) or '-'
            pdf.multi_cell(0, 5, f'{applicant.full_name}: {preferences}', new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        return pdf

    def generate(self, output_path: Union[str, Path]) -> None:
        """
        Generate the admission report.

        Parameters
        ----------
        output_path : str or Path
            Path to the PDF file to write.

        Raises
        ------
        OutputWriteError
            If the PDF cannot be laid out or written.
        """
        # Prepare a temporary file for the admissions chart
        fd, temp_plot_path = tempfile.mkstemp(suffix='.png', prefix='admissions_plot_')
        os.close(fd)
        try:
            self._create_admissions_plot(temp_plot_path)
            pdf = self._build(temp_plot_path)
            pdf.output(str(output_path))
        except (FPDFException, OSError) as exc:
            raise OutputWriteError(f"Cannot write report to {output_path}: {exc}") from exc
        finally:
            os.remove(temp_plot_path)
        logger.info("Report written to %s", output_path)
