"""Web server - HTTP command endpoint of the panetree daemon"""

from fastapi import FastAPI
from pydantic import BaseModel, Field

from ..commands import (
    CloseCommand,
    CommandResult,
    EqualizeCommand,
    PaneTarget,
    ReconcileCommand,
    SplitCommand,
)
from ..engine import PanetreeEngine
from ..errors import PanetreeError
from ..telemetry import get_logger, metrics
from ..topology.types import Direction, SplitSize

logger = get_logger(__name__)


class PaneTargetRequest(BaseModel):
    """Target pane; omitted ids resolve to the active pane"""

    window_id: str | None = None
    tab_id: str | None = None
    pane_id: str | None = None

    def to_target(self) -> PaneTarget:
        return PaneTarget(self.window_id, self.tab_id, self.pane_id)


class SplitRequest(PaneTargetRequest):
    """Split request body"""

    direction: str  # Left | Right | Up | Down
    percent: int | None = Field(default=None, gt=0, lt=100)
    cells: int | None = Field(default=None, gt=0)


class CloseRequest(PaneTargetRequest):
    """Close request body"""

    confirm: bool = True


class EqualizeRequest(PaneTargetRequest):
    """Equalize request body"""


class CommandResponse(BaseModel):
    """Command response"""

    success: bool
    message: str
    pane_id: str | None = None
    resizes: int = 0


def _response(result: CommandResult) -> CommandResponse:
    return CommandResponse(
        success=result.success,
        message=result.message,
        pane_id=result.pane_id,
        resizes=result.resizes,
    )


class WebServer:
    """HTTP server exposing the engine's commands"""

    def __init__(self, engine: PanetreeEngine):
        self.app = FastAPI(title="panetree")
        self.engine = engine
        self._setup_routes()

    async def _run(self, command) -> CommandResponse:
        try:
            return _response(await self.engine.dispatch(command))
        except PanetreeError as e:
            logger.error(f"[Server] {type(command).__name__} failed: {e}")
            return CommandResponse(success=False, message=str(e))

    def _setup_routes(self):
        @self.app.post("/api/split", response_model=CommandResponse)
        async def split(request: SplitRequest):
            """Split a pane"""
            try:
                command = SplitCommand(
                    direction=Direction.parse(request.direction),
                    size=SplitSize(percent=request.percent, cells=request.cells),
                    target=request.to_target(),
                )
            except ValueError as e:
                return CommandResponse(success=False, message=str(e))
            return await self._run(command)

        @self.app.post("/api/close", response_model=CommandResponse)
        async def close(request: CloseRequest):
            """Close a pane"""
            return await self._run(CloseCommand(confirm=request.confirm, target=request.to_target()))

        @self.app.post("/api/equalize", response_model=CommandResponse)
        async def equalize(request: EqualizeRequest):
            """Equalize the column widths of a tab"""
            return await self._run(EqualizeCommand(target=request.to_target()))

        @self.app.post("/api/reload", response_model=CommandResponse)
        async def reload():
            """Config reload notification"""
            return await self._run(ReconcileCommand())

        @self.app.get("/api/topology")
        async def topology():
            """Serialized topology store"""
            return self.engine.store.to_dict()

        @self.app.get("/api/health")
        async def health():
            """Daemon status"""
            return {
                "status": "ok",
                "adapter": self.engine.adapter.name,
                "panes": len(self.engine.store),
                "metrics": metrics.get_all_counters(),
            }
