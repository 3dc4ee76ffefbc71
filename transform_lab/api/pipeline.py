"""POST /api/pipeline/run — evaluate a shape against an operation list."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from transform_lab.dependencies import get_engine
from transform_lab.engine.pipeline import EngineResult, PipelineStep, TransformEngine
from transform_lab.engine.viewport import Viewport
from transform_lab.models.geometry import Point
from transform_lab.models.requests import RunRequest
from transform_lab.models.responses import GridLineOut, RunResponse, StepOut, ViewportOut

router = APIRouter(prefix="/pipeline")


def _step_out(step: PipelineStep, viewport: Viewport) -> StepOut:
    cx, cy = step.centroid
    return StepOut(
        index=step.index,
        label=step.label,
        title=step.title,
        points=[Point(x=x, y=y) for x, y in step.point_list()],
        presentation=[(float(u), float(v)) for u, v in viewport.map_points(step.points)],
        matrix=step.matrix.tolist(),
        accumulated=step.accumulated.tolist(),
        pivot=Point(x=step.pivot[0], y=step.pivot[1]) if step.pivot else None,
        centroid=Point(x=cx, y=cy),
    )


def result_to_response(result: EngineResult, step: int = 0) -> RunResponse:
    vp = result.viewport
    return RunResponse(
        steps=[_step_out(s, vp) for s in result.history],
        viewport=ViewportOut(
            min_x=vp.min_x,
            max_x=vp.max_x,
            min_y=vp.min_y,
            max_y=vp.max_y,
            width=vp.width,
            height=vp.height,
        ),
        grid_step=result.grid_step,
        grid_lines=[
            GridLineOut(
                orientation=line.orientation,
                model_coordinate=line.model_coordinate,
                is_axis=line.is_axis,
                position=line.position,
                label=line.label,
            )
            for line in result.grid_lines
        ],
        selected_step=result.history.clamp(step),
    )


@router.post("/run", response_model=RunResponse)
async def run(req: RunRequest, engine: TransformEngine = Depends(get_engine)) -> RunResponse:
    result = engine.evaluate(req.points, req.operations)
    return result_to_response(result, req.step)
