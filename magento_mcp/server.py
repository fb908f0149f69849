"""Magento MCP Server.

A Model Context Protocol server exposing Magento 2 store data as tools:
- Product lookup by SKU or ids, product search and categories
- Bestseller and revenue reports
- Two demonstration arithmetic tools

Each call must carry ``x-magento-domain`` and ``authorization`` headers;
they are read from the inbound HTTP request and forwarded to Magento.

Run with: uvicorn magento_mcp.server:app --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated, Literal, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import TextContent
from pydantic import Field
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from . import tools
from .config import Settings, load_settings
from .tools.reports import DATE_RANGE_HELP, STATUS_HELP

SERVER_NAME = "magento-mcp"
MCP_PATH = "/mcp"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure logging to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    return logging.getLogger(SERVER_NAME)


logger = logging.getLogger(SERVER_NAME)


def request_headers(ctx: Context) -> dict[str, str]:
    """Headers of the HTTP request carrying the current tool call.

    Empty when the call did not arrive over HTTP.
    """
    try:
        request = ctx.request_context.request
    except ValueError:
        return {}
    if request is None:
        return {}
    return {k.lower(): v for k, v in request.headers.items()}


# Tool wrappers: log the call, pull the per-call headers, delegate.


async def get_product_by_sku(
    ctx: Context,
    sku: Annotated[str, Field(description="The SKU of the product to retrieve")],
) -> list[TextContent]:
    logger.info(f"get_product_by_sku called: sku={sku}")
    return await tools.get_product_by_sku(sku, headers=request_headers(ctx))


async def get_products_by_ids(
    ctx: Context,
    ids: Annotated[str, Field(description="Comma-separated list of product IDs")],
) -> list[TextContent]:
    logger.info(f"get_products_by_ids called: ids={ids}")
    return await tools.get_products_by_ids(ids, headers=request_headers(ctx))


async def search_products(
    ctx: Context,
    query: Annotated[Optional[str], Field(description="Search query for product names")] = None,
    page_size: Annotated[float, Field(description="Number of products per page")] = 10,
    current_page: Annotated[float, Field(description="Current page number")] = 1,
) -> list[TextContent]:
    logger.info(f"search_products called: query={query}, page_size={page_size}, current_page={current_page}")
    return await tools.search_products(
        query=query or "",
        page_size=page_size,
        current_page=current_page,
        headers=request_headers(ctx),
    )


async def get_product_categories(
    ctx: Context,
    sku: Annotated[str, Field(description="The SKU of the product to get categories for")],
) -> list[TextContent]:
    logger.info(f"get_product_categories called: sku={sku}")
    return await tools.get_product_categories(sku, headers=request_headers(ctx))


async def get_bestsellers(
    ctx: Context,
    date_range: Annotated[str, Field(description=DATE_RANGE_HELP)] = "today",
    limit: Annotated[float, Field(description="Number of bestsellers to return")] = 10,
    status: Annotated[Optional[str], Field(description=STATUS_HELP)] = None,
) -> list[TextContent]:
    logger.info(f"get_bestsellers called: date_range={date_range}, limit={limit}, status={status}")
    return await tools.get_bestsellers(
        date_range=date_range,
        limit=limit,
        status=status,
        headers=request_headers(ctx),
    )


async def get_revenue(
    ctx: Context,
    date_range: Annotated[str, Field(description=DATE_RANGE_HELP)] = "today",
    status: Annotated[Optional[str], Field(description=STATUS_HELP)] = None,
    include_tax: Annotated[bool, Field(description="Whether to include tax in revenue calculation")] = True,
) -> list[TextContent]:
    logger.info(f"get_revenue called: date_range={date_range}, status={status}, include_tax={include_tax}")
    return await tools.get_revenue(
        date_range=date_range,
        status=status,
        include_tax=include_tax,
        headers=request_headers(ctx),
    )


def add(a: float, b: float) -> list[TextContent]:
    logger.info(f"add called: a={a}, b={b}")
    return tools.add(a, b)


def calculate(
    operation: Literal["add", "subtract", "multiply", "divide"],
    a: float,
    b: float,
) -> list[TextContent]:
    logger.info(f"calculate called: operation={operation}, a={a}, b={b}")
    return tools.calculate(operation, a, b)


TOOL_DESCRIPTIONS = {
    get_product_by_sku: "Get a product by its SKU.",
    get_products_by_ids: "Get several products by a comma-separated list of product IDs.",
    search_products: "Search products by name, with page size and page number.",
    get_product_categories: "Get the categories a product belongs to.",
    get_bestsellers: "Get the best-selling products for a date range, optionally filtered by order status.",
    get_revenue: "Get revenue for a date range, optionally filtered by order status and with or without tax.",
    add: "Add two numbers.",
    calculate: "Add, subtract, multiply or divide two numbers.",
}


def create_server(settings: Optional[Settings] = None) -> FastMCP:
    """Create the MCP server and register every tool once."""
    settings = settings or load_settings()
    server = FastMCP(
        SERVER_NAME,
        host=settings.host,
        port=settings.port,
        stateless_http=True,
        streamable_http_path=MCP_PATH,
    )

    for fn, description in TOOL_DESCRIPTIONS.items():
        server.add_tool(fn, description=description, structured_output=False)

    logger.info(f"Tools registered: {', '.join(fn.__name__ for fn in TOOL_DESCRIPTIONS)}")
    return server


async def _not_found(request: Request, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse("Not found", status_code=404)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the ASGI app: MCP transport at ``/mcp``, 404 everywhere else."""
    settings = settings or load_settings()
    server = create_server(settings)

    mcp_app = server.streamable_http_app()
    mcp_app.add_exception_handler(404, _not_found)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with server.session_manager.run():
            yield

    app = FastAPI(
        title="Magento MCP Server",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )
    app.add_exception_handler(404, _not_found)
    app.mount("/", mcp_app)

    app.state.mcp_server = server
    return app


app = create_app()
