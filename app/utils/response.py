# app/utils/response.py
import json
from typing import Any, Dict

from fastapi.responses import JSONResponse

def error_response(message: str) -> Dict[str, Any]:
    return {"message": message}

class PrettyJSONResponse(JSONResponse):
    """JSON response indented with two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")
