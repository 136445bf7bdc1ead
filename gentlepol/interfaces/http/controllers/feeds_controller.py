# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from gentlepol.application.use_cases.feeds.create_feed import CreateFeedUseCase
from gentlepol.application.use_cases.feeds.delete_feed import DeleteFeedUseCase
from gentlepol.application.use_cases.feeds.get_feed import GetFeedUseCase
from gentlepol.application.use_cases.feeds.list_feeds import ListFeedNamesUseCase
from gentlepol.application.use_cases.feeds.update_feed import UpdateFeedUseCase
from gentlepol.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from gentlepol.domain.users.entities import User
from gentlepol.interfaces.http.authentication import auth_required
from gentlepol.interfaces.http.dto.feeds import FeedDTO, FeedNamesDTO, FeedUpdateDTO, OkDTO
from gentlepol.shared.errors.validation import raise_validation_error
from gentlepol.shared.logging import logger


class FeedsController:
    def __init__(
        self,
        *,
        authenticate_use_case: AuthenticateUserUseCase,
        create_use_case: CreateFeedUseCase,
        list_use_case: ListFeedNamesUseCase,
        get_use_case: GetFeedUseCase,
        update_use_case: UpdateFeedUseCase,
        delete_use_case: DeleteFeedUseCase,
        session_cookie_name: str = "session_id",
    ) -> None:
        self._authenticate = authenticate_use_case
        self._create = create_use_case
        self._list = list_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._session_cookie_name = session_cookie_name

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("feeds", __name__, url_prefix="/api")
        bp.add_url_rule("/feeds", view_func=self.list_feeds, methods=["GET"])
        bp.add_url_rule("/feeds", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/feeds/<path:name>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/feeds/<path:name>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/feeds/<path:name>", view_func=self.delete, methods=["DELETE"])
        return bp

    @auth_required
    def list_feeds(self, user: User) -> Response:
        t0 = perf_counter()
        names = self._list.execute(user.id)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"feeds.list: ok (user_id={user.id}, n={len(names)}, dt_ms={dt:.0f})")
        return jsonify(FeedNamesDTO(items=names).model_dump())

    @auth_required
    def create(self, user: User) -> Response:
        try:
            dto = FeedDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._create.execute(user.id, dto.to_domain())
        return jsonify(OkDTO().model_dump())

    @auth_required
    def get(self, user: User, name: str) -> Response:
        definition = self._get.execute(user.id, name)
        return jsonify(FeedDTO.from_domain(definition).model_dump())

    @auth_required
    def update(self, user: User, name: str) -> Response:
        try:
            dto = FeedUpdateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._update.execute(user.id, name, dto.to_domain(name))
        return jsonify(OkDTO().model_dump())

    @auth_required
    def delete(self, user: User, name: str) -> Response:
        self._delete.execute(user.id, name)
        return jsonify(OkDTO().model_dump())
