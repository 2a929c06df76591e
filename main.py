from typing import Optional
from fastapi import FastAPI, Query, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from render_cache import RenderCache
from turks_config import DEFAULT_KNOT, MAX_BIGHTS, MAX_LEADS, RENDER_CACHE_SIZE, get_render_defaults
from turks_describe import describe_turkshead
from turkshead import InvalidParameters, TurksHead
from turksgen_web import draw_turkshead_web_bytes

app = FastAPI()
render_cache = RenderCache(max_entries=RENDER_CACHE_SIZE)

# ---------------- TurksHead -------------------

@app.get("/drawturkshead")
async def drawturkshead(
    leads: int = Query(DEFAULT_KNOT["leads"], le=MAX_LEADS),
    bights: int = Query(DEFAULT_KNOT["bights"], le=MAX_BIGHTS),
    inner_radius: float = Query(DEFAULT_KNOT["inner_radius"]),
    outer_radius: float = Query(DEFAULT_KNOT["outer_radius"]),
    line_width: float = Query(DEFAULT_KNOT["line_width"]),
    size: Optional[int] = Query(None, ge=16, le=4096, description="Image side in pixels (defaults to TURKSHEAD_IMG_SIZE)"),
):
    """Render a Turk's head knot as a PNG."""
    defaults = get_render_defaults()
    img_size = (size, size) if size else defaults["img_size"]

    key = RenderCache.make_key(
        leads=leads, bights=bights, inner_radius=inner_radius, outer_radius=outer_radius,
        line_width=line_width, img_size=img_size, padding=defaults["padding"], background=defaults["background"],
    )
    if await render_cache.contains(key):
        return Response(content=await render_cache.get(key), media_type="image/png")

    try:
        img_bytes = await run_in_threadpool(
            draw_turkshead_web_bytes,
            leads, bights, inner_radius, outer_radius, line_width,
            img_size=img_size, padding=defaults["padding"], background=defaults["background"],
        )
    except InvalidParameters as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    print(f"[RenderCache] miss, rendered {leads}x{bights} at {img_size[0]}px")
    await render_cache.add(key, img_bytes)
    return Response(content=img_bytes, media_type="image/png")


@app.get("/describe_turkshead")
def describe(
    leads: int = Query(DEFAULT_KNOT["leads"]),
    bights: int = Query(DEFAULT_KNOT["bights"]),
    inner_radius: float = Query(DEFAULT_KNOT["inner_radius"]),
    outer_radius: float = Query(DEFAULT_KNOT["outer_radius"]),
    line_width: float = Query(DEFAULT_KNOT["line_width"]),
):
    try:
        knot = TurksHead(leads, bights, inner_radius, outer_radius, line_width)
    except InvalidParameters as e:
        return JSONResponse({"success": False, "error": str(e)}, status_code=400)
    return JSONResponse({"success": True, **describe_turkshead(knot)})
