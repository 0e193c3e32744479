"""Normalisation of API Gateway proxy events."""

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ApiRequest:
    """The parts of an API Gateway event the handler works with."""

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ApiRequest":
        """
        Build a request from a REST (v1) or HTTP API (v2) proxy event.

        Args:
            event: Lambda event

        Returns:
            Normalised request
        """
        request_context = event.get('requestContext') or {}
        http = request_context.get('http') or {}

        method = event.get('httpMethod') or http.get('method') or 'GET'
        path = event.get('path') or event.get('rawPath') or http.get('path') or '/'

        # Header names are case-insensitive
        headers = {
            str(name).lower(): value
            for name, value in (event.get('headers') or {}).items()
            if value is not None
        }

        body = event.get('body')
        if body is not None and event.get('isBase64Encoded'):
            body = base64.b64decode(body).decode('utf-8')

        return cls(
            method=method.upper(),
            path=path,
            headers=headers,
            query=dict(event.get('queryStringParameters') or {}),
            body=body
        )

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON
        """
        return json.loads(self.body or '')
