from flask import current_app, jsonify
from campus_admin.extensions import db
from campus_admin.models import Material
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import get_payload, clean_text, clean_int
from campus_admin.utils.status import material_status
from . import materials_bp


def _status(quantity):
    return material_status(quantity, current_app.config["LOW_STOCK_THRESHOLD"])


@materials_bp.route("", methods=["GET"])
@login_required
def list_materials():
    materials = db.session.scalars(
        db.select(Material).order_by(Material.material_name)
    ).all()
    return jsonify([item.to_dict() for item in materials])


@materials_bp.route("", methods=["POST"])
@admin_required
def create_material():
    data = get_payload()

    quantity = clean_int(data, "quantity", default=0, minimum=0)
    item = Material(
        material_name=clean_text(data, "material_name", required=True),
        category=clean_text(data, "category", required=True),
        location=clean_text(data, "location", required=True),
        quantity=quantity,
        status=_status(quantity),
    )
    db.session.add(item)
    db.session.commit()
    return jsonify(item.to_dict()), 201


@materials_bp.route("/<int:material_id>/quantity", methods=["POST"])
@admin_required
def update_quantity(material_id):
    item = db.get_or_404(Material, material_id, description="Material not found")
    quantity = clean_int(get_payload(), "quantity", required=True, minimum=0)

    item.quantity = quantity
    item.status = _status(quantity)
    db.session.commit()

    current_app.logger.info(f"Material {item.material_name}: quantity {quantity} ({item.status})")
    return jsonify(item.to_dict())


@materials_bp.route("/<int:material_id>", methods=["DELETE"])
@admin_required
def delete_material(material_id):
    item = db.get_or_404(Material, material_id, description="Material not found")
    db.session.delete(item)
    db.session.commit()
    return "", 204
