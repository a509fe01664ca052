from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.guards import owner_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.time_slot_service

    @app.route("/owner/time-slots", methods=["GET"], endpoint="owner_time_slots")
    @owner_required
    @handle_errors
    def list_slots():
        day = request.args.get("day_of_week")
        slots = service.list_slots(day_of_week=day if day not in (None, "") else None)
        return ok([service.to_view(s) for s in slots])

    @app.route("/owner/time-slots", methods=["POST"], endpoint="add_time_slot")
    @owner_required
    @handle_errors
    def add_slot():
        data = request_data()
        slot = service.create(
            day_of_week=data.get("day_of_week"),
            start_time=data.get("start_time", ""),
            end_time=data.get("end_time", ""),
            position=data.get("position", ""),
            required_count=data.get("required_count"),
        )
        return ok(service.to_view(slot), message="Time slot added", status=201)

    @app.route("/owner/time-slots/<int:slot_id>", methods=["PUT", "POST"], endpoint="edit_time_slot")
    @owner_required
    @handle_errors
    def edit_slot(slot_id: int):
        data = request_data()
        service.update(
            slot_id,
            day_of_week=data.get("day_of_week"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            position=data.get("position"),
            required_count=data.get("required_count"),
        )
        return ok(message="Time slot updated")

    @app.route("/owner/time-slots/<int:slot_id>/delete", methods=["POST"], endpoint="delete_time_slot")
    @app.route("/owner/time-slots/<int:slot_id>", methods=["DELETE"])
    @owner_required
    @handle_errors
    def delete_slot(slot_id: int):
        service.delete(slot_id)
        return ok(message="Time slot deleted")

    @app.route("/owner/time-slots/coverage", endpoint="time_slot_coverage")
    @owner_required
    @handle_errors
    def coverage():
        work_date = request.args.get("date") or now_local(container.offset).date().isoformat()
        return ok(service.coverage(work_date))
