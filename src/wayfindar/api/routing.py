# src/wayfindar/api/routing.py
"""
Conventional ``{controller=home}/{action=index}/{id?}`` routing on top of FastAPI.

Each controller is a named group of endpoint functions. An action whose
signature has an ``id`` parameter is reachable at ``/{controller}/{action}/{id}``;
if ``id`` has a default it is also reachable without it. The default action is
additionally mounted at ``/{controller}`` and the default controller's default
action at ``/``.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Union

from fastapi import APIRouter, FastAPI

logger = logging.getLogger("wayfindar.routing")


@dataclass
class Controller:
    name: str
    actions: Dict[str, Callable] = field(default_factory=dict)

    def action(self, name: str | None = None) -> Callable[[Callable], Callable]:
        """Decorator registering ``func`` as an action (defaults to its function name)."""
        def register(func: Callable) -> Callable:
            self.actions[(name or func.__name__).lower()] = func
            return func
        return register


def action_paths(controller: str, action: str, endpoint: Callable,
                 default_controller: str, default_action: str) -> List[str]:
    id_param = inspect.signature(endpoint).parameters.get("id")
    paths: List[str] = []
    if id_param is not None:
        paths.append(f"/{controller}/{action}/{{id}}")
    if id_param is None or id_param.default is not inspect.Parameter.empty:
        paths.append(f"/{controller}/{action}")
        if action == default_action:
            paths.append(f"/{controller}")
            if controller == default_controller:
                paths.append("/")
    return paths


def map_controller_route(
    target: Union[FastAPI, APIRouter],
    controllers: Iterable[Controller],
    name: str = "default",
    default_controller: str = "home",
    default_action: str = "index",
) -> List[str]:
    """Install GET routes for every controller action; returns the installed paths."""
    installed: List[str] = []
    default_controller = default_controller.lower()
    default_action = default_action.lower()
    for controller in controllers:
        cname = controller.name.lower()
        for aname, endpoint in controller.actions.items():
            for i, path in enumerate(action_paths(cname, aname, endpoint, default_controller, default_action)):
                target.add_api_route(
                    path,
                    endpoint,
                    methods=["GET"],
                    name=f"{name}:{cname}.{aname}",
                    # alias paths stay out of the OpenAPI schema
                    include_in_schema=(i == 0),
                )
                installed.append(path)
    logger.debug("Route '%s' installed %d paths", name, len(installed))
    return installed


class LowercaseRouteMiddleware:
    """
    Lower-case the controller and action segments of incoming paths, so
    ``/Home/Index`` reaches the same endpoint as ``/home/index``. Paths whose
    first segment is not a known controller (``/static``, ``/health``) pass
    through untouched.
    """

    def __init__(self, app, controllers: Iterable[str]):
        self.app = app
        self.controllers = {name.lower() for name in controllers}

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            path = scope["path"]
            segments = path.split("/")
            # ["", controller, action, id, ...]
            if len(segments) > 1 and segments[1].lower() in self.controllers:
                lowered = "/".join(segments[:1] + [s.lower() for s in segments[1:3]] + segments[3:])
                if lowered != path:
                    scope = dict(scope, path=lowered, raw_path=lowered.encode("utf-8"))
        await self.app(scope, receive, send)
