from flask import Blueprint, current_app, jsonify, request, send_file

from hausaufgaben import get_image_service

images_bp = Blueprint("images", __name__, url_prefix="/api")


@images_bp.route("/images/<category>", methods=["GET"])
def list_images(category):
    # immer frisch von der Platte lesen, der Cache kann veraltet sein
    records = get_image_service().list_images(category)
    return jsonify({
        "success": True,
        "category": category,
        "count": len(records),
        "images": [record.to_dict() for record in records],
    })


@images_bp.route("/images/upload", methods=["POST"])
def upload_images():
    files = request.files.getlist("images")
    category = request.form.get("category")

    current_app.logger.info("📸 Upload von %d Datei(en) nach %s", len(files), category or "Standard")

    category, records = get_image_service().upload(files, category)
    return jsonify({
        "success": True,
        "uploadedCount": len(records),
        "category": category,
        "images": [record.to_dict() for record in records],
    })


@images_bp.route("/images/file/<filename>", methods=["GET"])
def get_image_file(filename):
    record, path = get_image_service().locate_file(filename)
    return send_file(path, mimetype=record.mime_type, download_name=record.original_name)


@images_bp.route("/images/<filename>", methods=["DELETE"])
def delete_image(filename):
    record = get_image_service().delete_image(filename)
    return jsonify({
        "success": True,
        "message": "Bild gelöscht",
        "filename": record.filename,
        "category": record.category,
    })


@images_bp.route("/images/category/<category>", methods=["DELETE"])
def delete_category(category):
    deleted = get_image_service().delete_category(category)
    return jsonify({
        "success": True,
        "category": category,
        "deletedCount": deleted,
    })


@images_bp.route("/categories", methods=["GET"])
def list_categories():
    categories, total = get_image_service().category_summary()
    return jsonify({
        "success": True,
        "categories": categories,
        "totalImages": total,
    })
