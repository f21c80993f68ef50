from decimal import Decimal
import json

from fastapi import Request
from fastapi.routing import APIRoute


class DecimalJSONRequest(Request):
    """Request whose JSON body keeps fractional numbers as ``Decimal``."""

    async def json(self):
        if not hasattr(self, "_json"):
            self._json = json.loads(await self.body(), parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    def get_route_handler(self):
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request):
            return await original_route_handler(DecimalJSONRequest(request.scope, request.receive))

        return route_handler
