"""PDF generator untuk submission Evaluasi dan Laporan (presentasi saja)."""

import io
from typing import Optional, List, Dict, Any
from datetime import datetime, timedelta
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, KeepTogether
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT

from src.core.config import settings

PLACEHOLDER = "-"

# Warna kategori dari kelas Tailwind yang disimpan di color_class
CATEGORY_COLORS = {
    "red": colors.HexColor("#DC2626"),
    "orange": colors.HexColor("#EA580C"),
    "yellow": colors.HexColor("#CA8A04"),
    "green": colors.HexColor("#16A34A"),
    "emerald": colors.HexColor("#059669"),
    "blue": colors.HexColor("#2563EB"),
}


def color_from_class(color_class: Optional[str]):
    """text-emerald-600 -> warna reportlab. Kelas tidak dikenal -> hitam."""
    if not color_class:
        return colors.black
    for part in color_class.split("-"):
        if part in CATEGORY_COLORS:
            return CATEGORY_COLORS[part]
    return colors.black


def _text(value: Any) -> str:
    """Nilai kosong jadi placeholder; teks di-escape untuk Paragraph."""
    if value is None:
        return PLACEHOLDER
    value = str(value).strip()
    return escape(value) if value else PLACEHOLDER


class BasePDFGenerator:
    """Style dan helper bersama untuk semua dokumen pelaporan."""

    def __init__(self, pagesize=A4):
        self.pagesize = pagesize
        self.page_width, self.page_height = pagesize
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _format_date_indonesia(self, date_obj) -> str:
        """Format tanggal ke format Indonesia: 15 Agustus 2025"""
        if not date_obj:
            return PLACEHOLDER

        if isinstance(date_obj, str):
            try:
                date_obj = datetime.fromisoformat(date_obj.replace('Z', '+00:00')).date()
            except ValueError:
                return date_obj
        if isinstance(date_obj, datetime):
            date_obj = date_obj.date()

        months = [
            '', 'Januari', 'Februari', 'Maret', 'April', 'Mei', 'Juni',
            'Juli', 'Agustus', 'September', 'Oktober', 'November', 'Desember'
        ]
        return f"{date_obj.day} {months[date_obj.month]} {date_obj.year}"

    def _setup_custom_styles(self):
        self.styles.add(ParagraphStyle(
            name='KopSurat',
            parent=self.styles['Normal'],
            fontSize=12,
            fontName='Helvetica-Bold',
            alignment=TA_LEFT,
            spaceAfter=3
        ))
        self.styles.add(ParagraphStyle(
            name='DocTitle',
            parent=self.styles['Title'],
            fontSize=14,
            fontName='Helvetica-Bold',
            alignment=TA_CENTER,
            spaceAfter=12,
            spaceBefore=12
        ))
        self.styles.add(ParagraphStyle(
            name='SectionTitle',
            parent=self.styles['Normal'],
            fontSize=11,
            fontName='Helvetica-Bold',
            spaceBefore=8,
            spaceAfter=4
        ))
        self.styles.add(ParagraphStyle(
            name='CellText',
            parent=self.styles['Normal'],
            fontSize=8,
            leading=10
        ))
        self.styles.add(ParagraphStyle(
            name='Footer',
            parent=self.styles['Normal'],
            fontSize=8,
            textColor=colors.grey,
            alignment=TA_LEFT
        ))

    def _cell(self, value: Any) -> Paragraph:
        return Paragraph(_text(value), self.styles['CellText'])

    def _build_document(self, story: List[Any]) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.pagesize,
            rightMargin=1.5*cm,
            leftMargin=1.5*cm,
            topMargin=1.5*cm,
            bottomMargin=2*cm
        )
        doc.build(story)
        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes

    def _build_header(self, title: str) -> List[Any]:
        elements = [
            Paragraph(escape(settings.PDF_ORGANIZATION_NAME), self.styles['KopSurat']),
            Spacer(1, 0.4*cm),
            Paragraph(escape(title), self.styles['DocTitle']),
            Spacer(1, 0.4*cm),
        ]
        return elements

    def _build_info_table(self, rows: List[List[Any]], label_width: float) -> List[Any]:
        """Blok identitas: label : nilai. Nilai kosong jadi dash."""
        content_width = self.page_width - 3*cm
        data = [[label, ':', self._cell(value)] for label, value in rows]
        table = Table(data, colWidths=[label_width, 0.5*cm, content_width - label_width - 0.5*cm])
        table.setStyle(TableStyle([
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica'),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('ALIGN', (1, 0), (1, -1), 'CENTER'),
            ('TOPPADDING', (0, 0), (-1, -1), 1),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 1),
        ]))
        return [table, Spacer(1, 0.6*cm)]

    def _build_footer(self, submission_code: Optional[str]) -> List[Any]:
        # WIB = UTC+7
        now = datetime.utcnow() + timedelta(hours=7)
        text = f"Dicetak {self._format_date_indonesia(now.date())} {now.strftime('%H:%M')} WIB"
        if submission_code:
            text += f" | Kode: {escape(submission_code)}"
        return [Spacer(1, 0.8*cm), Paragraph(text, self.styles['Footer'])]

    @staticmethod
    def _grid_style() -> List[tuple]:
        return [
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 8),
            ('ALIGN', (0, 0), (-1, 0), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#F3F4F6')),
        ]


class EvaluasiPDFGenerator(BasePDFGenerator):
    """Dokumen hasil evaluasi: identitas, tabel per klaster, ringkasan skor."""

    def generate_evaluasi_pdf(
        self,
        submission_data: Dict[str, Any],
        cluster_groups: List[Dict[str, Any]],
        category: Optional[Dict[str, Any]] = None
    ) -> bytes:
        """
        Generate PDF evaluasi.

        Args:
            submission_data: field identitas submission (dict)
            cluster_groups: [{"title": str, "answers": [{"question_text", "answer_value", "remark"}]}]
            category: {"label", "color_class"} atau None
        """
        story = []
        story.extend(self._build_header("HASIL EVALUASI MANDIRI GERMAS TATANAN TEMPAT KERJA"))
        story.extend(self._build_identity(submission_data))

        for index, group in enumerate(cluster_groups, 1):
            story.extend(self._build_cluster_table(index, group))

        story.extend(self._build_score_summary(submission_data, category))
        story.extend(self._build_footer(submission_data.get('submission_code')))
        return self._build_document(story)

    def _build_identity(self, data: Dict[str, Any]) -> List[Any]:
        male = data.get('employee_male_count')
        female = data.get('employee_female_count')
        total = None
        if male is not None or female is not None:
            total = (male or 0) + (female or 0)

        origin_parts = [
            data.get('origin_village_name'),
            data.get('origin_district_name'),
            data.get('origin_regency_name'),
        ]
        origin = ", ".join(part for part in origin_parts if part) or None

        rows = [
            ['Kode Submission', data.get('submission_code')],
            ['Nama Instansi', data.get('instansi_name')],
            ['Tingkat Instansi', data.get('instansi_level_text')],
            ['Alamat', data.get('instansi_address')],
            ['Asal Wilayah', origin],
            ['Nama Pejabat', data.get('pejabat_nama')],
            ['Jabatan', data.get('pejabat_jabatan')],
            ['Pegawai Laki-laki', male],
            ['Pegawai Perempuan', female],
            ['Total Pegawai', total],
            ['Tanggal Evaluasi', self._format_date_indonesia(data.get('evaluation_date'))],
            ['Tahun Laporan', data.get('report_year')],
        ]
        return self._build_info_table(rows, label_width=4.5*cm)

    def _build_cluster_table(self, index: int, group: Dict[str, Any]) -> List[Any]:
        content_width = self.page_width - 3*cm
        table_data = [['No', 'Indikator', 'Ya', 'Tidak', 'Keterangan']]

        answers = group.get('answers') or []
        for number, answer in enumerate(answers, 1):
            value = answer.get('answer_value')
            table_data.append([
                str(number),
                self._cell(answer.get('question_text')),
                "V" if value == 1 else "",
                "V" if value == 0 else "",
                self._cell(answer.get('remark')),
            ])
        if not answers:
            table_data.append(["", self._cell(None), "", "", ""])

        col_widths = [1*cm, content_width - 8*cm, 1.5*cm, 1.5*cm, 4*cm]
        table = Table(table_data, colWidths=col_widths, repeatRows=1)
        table.setStyle(TableStyle(self._grid_style() + [
            ('ALIGN', (0, 1), (0, -1), 'CENTER'),
            ('ALIGN', (2, 1), (3, -1), 'CENTER'),
            ('FONTNAME', (2, 1), (3, -1), 'Helvetica-Bold'),
        ]))

        title = Paragraph(escape(group.get('title') or PLACEHOLDER), self.styles['SectionTitle'])
        return [KeepTogether([title, table]), Spacer(1, 0.3*cm)]

    def _build_score_summary(self, data: Dict[str, Any], category: Optional[Dict[str, Any]]) -> List[Any]:
        label = (category or {}).get('label') or data.get('category_label')
        color = color_from_class((category or {}).get('color_class'))
        score = data.get('score')

        summary = Table(
            [['Nilai Akhir', PLACEHOLDER if score is None else str(score)],
             ['Kategori', label or PLACEHOLDER]],
            colWidths=[4.5*cm, 5*cm]
        )
        summary.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
            ('FONTNAME', (1, 0), (1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 11),
            ('TEXTCOLOR', (1, 0), (1, -1), color),
            ('BOX', (0, 0), (-1, -1), 1, colors.black),
            ('INNERGRID', (0, 0), (-1, -1), 0.5, colors.black),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ]))
        return [Spacer(1, 0.5*cm), KeepTogether([summary])]


class LaporanPDFGenerator(BasePDFGenerator):
    """Dokumen laporan kegiatan: identitas dan tabel target/anggaran per section."""

    def __init__(self):
        super().__init__(pagesize=landscape(A4))

    def generate_laporan_pdf(
        self,
        submission_data: Dict[str, Any],
        sections: List[Dict[str, Any]]
    ) -> bytes:
        """
        Generate PDF laporan.

        Section dengan has_target/has_budget False menampilkan dash di sub-kolom terkait,
        walaupun nilainya tersimpan.
        """
        story = []
        story.extend(self._build_header("LAPORAN PELAKSANAAN KEGIATAN GERMAS"))
        story.extend(self._build_identity(submission_data))
        story.extend(self._build_section_table(sections))
        story.extend(self._build_footer(submission_data.get('submission_code')))
        return self._build_document(story)

    def _build_identity(self, data: Dict[str, Any]) -> List[Any]:
        rows = [
            ['Kode Submission', data.get('submission_code')],
            ['Nama Instansi', data.get('instansi_name')],
            ['Tingkat Instansi', data.get('instansi_level_text')],
            ['Kabupaten/Kota', data.get('origin_regency_name')],
            ['Tahun Laporan', data.get('report_year')],
            ['Tingkat Laporan', data.get('report_level')],
            ['Template', data.get('template_name')],
            ['Catatan', data.get('notes')],
        ]
        return self._build_info_table(rows, label_width=4.5*cm)

    def _build_section_table(self, sections: List[Dict[str, Any]]) -> List[Any]:
        content_width = self.page_width - 3*cm
        header_top = ['No', 'Kode', 'Kegiatan', 'Target', '', '', 'Anggaran', '', '', 'Keterangan']
        header_sub = ['', '', '', 'Tahun', 'Smt 1', 'Smt 2', 'Tahun', 'Smt 1', 'Smt 2', '']
        table_data = [header_top, header_sub]

        for number, section in enumerate(sections, 1):
            has_target = section.get('has_target', True)
            has_budget = section.get('has_budget', True)

            def sub(field: str, enabled: bool):
                return self._cell(section.get(field)) if enabled else PLACEHOLDER

            table_data.append([
                str(number),
                self._cell(section.get('section_code')),
                self._cell(section.get('section_title')),
                sub('target_year', has_target),
                sub('target_semester_1', has_target),
                sub('target_semester_2', has_target),
                sub('budget_year', has_budget),
                sub('budget_semester_1', has_budget),
                sub('budget_semester_2', has_budget),
                self._cell(section.get('notes')),
            ])
        if not sections:
            table_data.append([''] * 2 + [self._cell(None)] + [''] * 7)

        value_width = 2.2*cm
        fixed = 1*cm + 1.8*cm + 6 * value_width + 4*cm
        col_widths = [1*cm, 1.8*cm, content_width - fixed, *([value_width] * 6), 4*cm]

        table = Table(table_data, colWidths=col_widths, repeatRows=2)
        table.setStyle(TableStyle(self._grid_style() + [
            ('FONTNAME', (0, 1), (-1, 1), 'Helvetica-Bold'),
            ('ALIGN', (0, 1), (-1, 1), 'CENTER'),
            ('BACKGROUND', (0, 1), (-1, 1), colors.HexColor('#F3F4F6')),
            ('SPAN', (0, 0), (0, 1)),
            ('SPAN', (1, 0), (1, 1)),
            ('SPAN', (2, 0), (2, 1)),
            ('SPAN', (3, 0), (5, 0)),
            ('SPAN', (6, 0), (8, 0)),
            ('SPAN', (9, 0), (9, 1)),
            ('ALIGN', (0, 2), (0, -1), 'CENTER'),
            ('ALIGN', (3, 2), (8, -1), 'CENTER'),
        ]))
        return [table]
