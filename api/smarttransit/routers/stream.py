from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

router = APIRouter()


@router.get("/routes")
async def stream_routes(request: Request):
    """Server-sent events: the current snapshot, then one event per simulator notification."""
    broadcaster = request.app.state.broadcaster
    return StreamingResponse(broadcaster.events(), media_type="text/event-stream")
