"""Flask JSON query interface over the fleet file."""

from datetime import date
from pathlib import Path

from flask import Flask, abort, jsonify, request

from assetwatch import count_by_level, filter_warnings, grand_total, load_fleet, parse_date
from assetwatch.config import settings
from assetwatch.logger import get_logger

logger = get_logger(__name__)

app = Flask(__name__)
app.secret_key = settings.SECRET_KEY
app.config["FLEET_FILE"] = settings.FLEET_FILE

CATEGORIES = ("all", "vehicle", "pc", "general")


def get_fleet():
    """Load the configured fleet file, or 404 if it is missing."""
    path = Path(app.config["FLEET_FILE"])
    if not path.exists():
        logger.warning("Fleet file not found: %s", path)
        abort(404, description=f"Fleet file not found: {path}")
    return load_fleet(path)


def get_as_of() -> date:
    """Reference date from ?as_of=, then AS_OF_DATE, then today."""
    value = request.args.get("as_of") or settings.AS_OF_DATE
    if value is None:
        return date.today()
    parsed = parse_date(value)
    if parsed is None:
        abort(400, description=f"Invalid as_of date: {value}")
    return parsed


def get_month_range():
    start = request.args.get("start", "")
    end = request.args.get("end", "")
    if not start or not end:
        abort(400, description="start and end are required (YYYY-MM)")
    return start, end


@app.errorhandler(400)
@app.errorhandler(404)
def json_error(error):
    return jsonify({"error": error.description}), error.code


@app.route("/api/warnings")
def warnings():
    """Deadline warnings, optionally filtered by ?category=."""
    category = request.args.get("category", "all").lower()
    if category not in CATEGORIES:
        abort(400, description=f"Unknown category: {category}")

    fleet = get_fleet()
    as_of = get_as_of()
    all_warnings = fleet.warnings(as_of)
    counts = count_by_level(all_warnings)

    return jsonify({
        "asOf": as_of.isoformat(),
        "counts": {level.label: count for level, count in counts.items()},
        "warnings": [w.to_dict() for w in filter_warnings(all_warnings, category)],
    })


@app.route("/api/costs")
def costs():
    """Monthly cost summary for ?start=YYYY-MM&end=YYYY-MM."""
    start, end = get_month_range()
    summaries = get_fleet().cost_summary(start, end)
    return jsonify({
        "start": start,
        "end": end,
        "grandTotal": grand_total(summaries),
        "months": [s.to_dict() for s in summaries],
    })


@app.route("/api/vehicle-costs")
def vehicle_costs():
    """Per-vehicle cost breakdown for ?start=YYYY-MM&end=YYYY-MM."""
    start, end = get_month_range()
    rows = get_fleet().vehicle_costs(start, end)
    return jsonify({
        "start": start,
        "end": end,
        "leaseTotal": sum(r.lease_cost for r in rows),
        "maintenanceTotal": sum(r.maintenance_cost for r in rows),
        "grandTotal": grand_total(rows),
        "vehicles": [r.to_dict() for r in rows],
    })


@app.route("/api/vendors")
def vendors():
    """Vendors with work counts derived from maintenance records."""
    fleet = get_fleet()
    counts = fleet.vendor_work_counts()
    return jsonify([
        {
            "id": v.id,
            "name": v.name,
            "contactPerson": v.contact_person,
            "phone": v.phone,
            "rating": v.rating,
            "workCount": counts[v.id],
        }
        for v in fleet.vendors
    ])


if __name__ == "__main__":
    app.run(debug=True, port=5000)
