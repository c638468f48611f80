from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import pandas as pd

from aoc_solver import solve_calibration, solve_cube_games, solve_schematic
from aoc_solver.errors import SolverError
from aoc_solver.logging_utils import get_logger

logger = get_logger()

app = FastAPI()


class SchematicRequest(BaseModel):
    board: list[str]  # 1 行 1 文字列
    include_gears: bool = False


class CalibrationRequest(BaseModel):
    lines: list[str]
    spelled: bool = True


class CubesRequest(BaseModel):
    lines: list[str]


@app.post("/api/schematic")
async def api_schematic(request: SchematicRequest):
    """
    Day 3 solver endpoint.
    Receives the schematic rows, converts them to a 1-char-per-cell DataFrame, and sums parts and gears.
    """
    try:
        # 行文字列を 1 セル 1 文字の DataFrame に変換
        df = pd.DataFrame([list(row) for row in request.board])
        return solve_schematic(df, include_gears=request.include_gears)
    except SolverError as e:
        logger.warning("schematic request rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/calibration")
async def api_calibration(request: CalibrationRequest):
    """Day 1 solver endpoint."""
    result = solve_calibration(request.lines)
    total = result["spelled_total"] if request.spelled else result["digits_total"]
    return {"total": total}


@app.post("/api/cubes")
async def api_cubes(request: CubesRequest):
    """Day 2 solver endpoint."""
    try:
        result = solve_cube_games(request.lines)
    except SolverError as e:
        logger.warning("cubes request rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"possible_id_sum": result["possible_id_sum"], "power_sum": result["power_sum"]}
