#!/usr/bin/env python3
"""
Flask Web Application for the SARIF Code Flow Viewer
Provides a REST API that converts the code flows of an uploaded SARIF log.
"""

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
import os
import tempfile
from sarif_flows import SarifAnalyzer
from sarif_flows.web import prepare_results

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()

ALLOWED_EXTENSIONS = {'sarif', 'json'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


@app.route('/api/health')
def health():
    """Liveness probe."""
    return jsonify({'status': 'ok'})


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to convert the code flows of a SARIF file.
    Accepts: multipart/form-data with fields:
      - 'file': SARIF log (.sarif or .json)
      - 'source_root': directory artifact URIs are resolved against (optional)
      - 'remap_root': second directory tried for not-mapped locations (optional)
    Returns: JSON with summary, rule counts and code flow trees
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']

    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Only SARIF or JSON files are allowed.'}), 400

    source_root = request.form.get('source_root') or None
    remap_root = request.form.get('remap_root') or None

    filepath = None
    try:
        filename = secure_filename(file.filename)
        filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
        file.save(filepath)

        analyzer = SarifAnalyzer(source_root=source_root)
        analyzer.process_sarif_file(filepath)
        if remap_root:
            analyzer.remap_results(source_root=remap_root)

        results = prepare_results(analyzer)

        return jsonify(results)

    except Exception as e:
        return jsonify({'error': str(e)}), 500

    finally:
        if filepath and os.path.exists(filepath):
            os.remove(filepath)


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
