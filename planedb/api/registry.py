"""
Registration lookup API endpoints.

Provides endpoints for:
- GET /api/aircraft/<icao24> - Registration plus resolved type
- GET /api/aircraft/types/<model_id> - Type reference record
- GET /api/aircraft/status - Database state and index statistics
"""

import logging
import threading
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify, current_app

logger = logging.getLogger(__name__)

registry_bp = Blueprint('registry', __name__, url_prefix='/api/aircraft')

# PlaneDb lookups mutate the single-slot caches; serialize request threads
_db_lock = threading.Lock()


def _get_db():
    """The app's PlaneDb, or None when it failed to initialize or was closed."""
    db = current_app.config.get('PLANE_DB')
    if db is None or not db.is_ready:
        return None
    return db


def _unavailable():
    return jsonify({'error': 'Plane database unavailable'}), 503


@registry_bp.route('/status', methods=['GET'])
def get_status():
    """Get database state and per-index statistics."""
    db = _get_db()
    if db is None:
        return jsonify({
            'status': 'unavailable',
            'timestamp': datetime.now(timezone.utc).isoformat(),
        })

    with _db_lock:
        stats = db.stats

    return jsonify({
        'status': stats['state'],
        'types': stats['types'],
        'registrations': stats['registrations'],
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@registry_bp.route('/types/<int:model_id>', methods=['GET'])
def get_type(model_id: int):
    """Get a type reference record by model id."""
    db = _get_db()
    if db is None:
        return _unavailable()

    with _db_lock:
        type_info = db.lookup_type(model_id)

    if type_info is None:
        return jsonify({'error': 'Model not found'}), 404
    return jsonify(type_info.to_dict())


@registry_bp.route('/<icao24>', methods=['GET'])
def get_aircraft(icao24: str):
    """
    Get registration details for an ICAO24 address.

    The resolved type is included under 'type', or null when the
    registration's model id has no reference record.
    """
    start_time = time.perf_counter()

    db = _get_db()
    if db is None:
        return _unavailable()

    with _db_lock:
        plane = db.lookup(icao24)
        type_info = db.resolve(plane) if plane is not None else None

    if plane is None:
        return jsonify({'error': 'Plane not found'}), 404

    result = plane.to_dict()
    result['type'] = type_info.to_dict() if type_info else None

    query_time_ms = (time.perf_counter() - start_time) * 1000
    result['query_time_ms'] = round(query_time_ms, 2)

    return jsonify(result)
