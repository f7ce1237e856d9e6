"""
Upload Routes - Store images and videos under the public uploads folder
"""

import os

from flask import current_app, jsonify, request, send_from_directory
from utils.decorators import admin_required
from utils.helpers import build_upload_filename, validate_upload
from . import uploads_bp


def get_upload_folder():
    return os.path.abspath(current_app.config['UPLOAD_FOLDER'])


@uploads_bp.route('/api/upload', methods=['POST'])
@admin_required
def upload():
    """Validate and save an uploaded file, returning its public URL"""
    file = request.files.get('file')
    kind = validate_upload(file)

    upload_folder = get_upload_folder()
    os.makedirs(upload_folder, exist_ok=True)

    filename = build_upload_filename(file.filename)
    file.save(os.path.join(upload_folder, filename))
    current_app.logger.info(f"Saved {kind} upload {filename}")

    return jsonify({'url': f'/uploads/{filename}'}), 201


@uploads_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(get_upload_folder(), filename)
