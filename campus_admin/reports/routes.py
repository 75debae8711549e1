from datetime import datetime
from flask import current_app, jsonify, request, abort, send_file
from campus_admin.utils.decorators import login_required
from .builders import REPORTS
from .export import to_xlsx, to_pdf, XLSX_MIMETYPE
from . import reports_bp


@reports_bp.route("", methods=["GET"])
@login_required
def list_reports():
    return jsonify([
        {"slug": slug, "name": name, "description": description}
        for slug, (name, description, _) in REPORTS.items()
    ])


@reports_bp.route("/<slug>", methods=["GET"])
@login_required
def generate_report(slug):
    if slug not in REPORTS:
        abort(404, description="Unknown report")

    fmt = request.args.get("format", "xlsx").lower()
    if fmt not in ("xlsx", "pdf"):
        abort(400, description="format must be xlsx or pdf")

    name, description, builder = REPORTS[slug]
    sheets = builder()
    generated_at = datetime.utcnow()
    filename = f"{slug}_report_{generated_at:%Y%m%d}.{fmt}"

    current_app.logger.info(f"Generating {name} ({fmt})")

    if fmt == "pdf":
        output = to_pdf(name, description, sheets, generated_at)
        mimetype = "application/pdf"
    else:
        output = to_xlsx(sheets)
        mimetype = XLSX_MIMETYPE

    return send_file(
        output,
        as_attachment=True,
        download_name=filename,
        mimetype=mimetype
    )
