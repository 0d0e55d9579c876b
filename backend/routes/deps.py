"""Shared request dependencies."""

import random

from fastapi import Request

from urb_companion.storage import Storage


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng
