from io import BytesIO
import pandas as pd
from flask import render_template
from openpyxl import load_workbook
from openpyxl.styles import Font, PatternFill, Alignment

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def to_xlsx(sheets):
    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for name, df in sheets.items():
            # Excel caps sheet names at 31 characters
            df.to_excel(writer, sheet_name=name[:31], index=False)
    output.seek(0)

    # --- Styling ---
    wb = load_workbook(output)
    header_fill = PatternFill(start_color="1E3C72", end_color="1E3C72", fill_type="solid")
    header_font = Font(color="FFFFFF", bold=True)

    for ws in wb.worksheets:
        for cell in ws[1]:
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = Alignment(horizontal="center", vertical="center")

        ws.freeze_panes = "A2"

        for col in ws.columns:
            max_length = 0
            column = col[0].column_letter
            for cell in col:
                if cell.value is not None:
                    max_length = max(max_length, len(str(cell.value)))
            ws.column_dimensions[column].width = max_length + 2

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output


def to_pdf(title, description, sheets, generated_at):
    from weasyprint import HTML

    html = render_template(
        "reports/report.html",
        title=title,
        description=description,
        generated_at=generated_at,
        tables=[
            (name, df.to_html(index=False, na_rep="", classes="report-table", border=0))
            for name, df in sheets.items()
        ],
    )
    return BytesIO(HTML(string=html).write_pdf())
