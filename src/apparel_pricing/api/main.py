import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from apparel_pricing import __version__
from apparel_pricing.config.settings import get_settings
from apparel_pricing.data.build_price_sheet import price_matrix
from apparel_pricing.engine.batch import summarize_batch
from apparel_pricing.engine.categories import product_family
from apparel_pricing.engine.models import Coverage, OrderLine, ProductType
from apparel_pricing.engine.sizes import known_sizes
from apparel_pricing.orders.batch import Batch
from apparel_pricing.orders.status import OrderStatus, Role, status_counts, transition
from apparel_pricing.orders.validation import CustomerInput, OrderItemInput
from apparel_pricing.reports.ledger import Transaction, account_totals, customer_statement
from apparel_pricing.api.state import engine

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Apparel Pricing API",
    description="Pricing, batch intake and production tracking for custom apparel orders",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class QuoteRequest(BaseModel):
    product_type: str
    coverage: Optional[str] = Coverage.SET.value
    size: str = ""


class BatchRequest(BaseModel):
    items: list[dict]
    recompute_missing: bool = False


class OrderSubmission(BaseModel):
    customer: CustomerInput
    items: list[OrderItemInput]


class StatusChangeRequest(BaseModel):
    order: dict
    status: str
    role: str = Role.ADMIN.value


class OrdersRequest(BaseModel):
    orders: list[dict]


class LedgerRequest(BaseModel):
    customers: list[dict] = []
    orders: list[dict] = []
    transactions: list[dict] = []


@app.get("/")
async def root():
    return {"status": "online", "message": "Apparel Pricing API Active"}


@app.get("/products")
async def get_products():
    return {
        "products": [
            {"name": p.value, "family": product_family(p.value).value}
            for p in ProductType
        ],
        "coverages": [c.value for c in Coverage],
        "sizes": list(known_sizes()),
        "statuses": [{"value": s.value, "label": s.label} for s in OrderStatus],
    }


@app.post("/quote")
async def quote_item(req: QuoteRequest):
    return engine.quote(req.product_type, req.coverage, req.size).to_dict()


@app.post("/quote/explain")
async def explain_quote(req: QuoteRequest):
    quote, trace = engine.quote_with_trace(req.product_type, req.coverage, req.size)
    return {
        **quote.to_dict(),
        "trace": [{"step": t.step, "description": t.description, "value": t.value} for t in trace],
    }


@app.get("/price-sheet")
async def get_price_sheet(product: Optional[str] = None):
    df = price_matrix(engine)
    if product:
        df = df[df['Product'] == product]
        if df.empty:
            raise HTTPException(status_code=404, detail=f"Product '{product}' not found")
    return df.to_dict(orient="records")


@app.post("/batch/summary")
async def batch_summary(req: BatchRequest):
    try:
        items = [OrderLine.from_record(row) for row in req.items]
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    summary = summarize_batch(items, engine if req.recompute_missing else None)
    return summary.to_dict()


@app.post("/orders/validate")
async def validate_order(submission: OrderSubmission):
    batch = Batch(customer=submission.customer, engine=engine)
    try:
        batch.add_many(submission.items)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    summary = batch.summary()
    logger.info("Validated batch for %s: %d items, total %d",
                submission.customer.team_name, summary.item_count, summary.total)
    return {
        "rows": batch.to_order_rows(),
        "total": summary.total,
        "item_count": summary.item_count,
    }


@app.post("/orders/status")
async def change_status(req: StatusChangeRequest):
    try:
        order = OrderLine.from_record(req.order)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        updated = transition(order, req.status, req.role)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return updated.to_record()


@app.post("/orders/stats")
async def order_stats(req: OrdersRequest):
    try:
        orders = [OrderLine.from_record(row) for row in req.orders]
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return status_counts(orders)


@app.post("/ledger/statement")
async def ledger_statement(req: LedgerRequest):
    try:
        orders = [OrderLine.from_record(row) for row in req.orders]
        transactions = [Transaction.from_record(row) for row in req.transactions]
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    statement = customer_statement(req.customers, orders, transactions, engine)
    return {
        "customers": statement.reset_index().to_dict(orient="records"),
        "totals": account_totals(orders, transactions, engine),
    }


@app.get("/system/status")
async def get_status():
    has_sheet = settings.price_sheet.exists()
    return {
        "engine_active": True,
        "version": __version__,
        "currency": settings.currency_symbol,
        "price_sheet_built": has_sheet,
        "price_sheet_last_build": settings.price_sheet.stat().st_mtime if has_sheet else None,
    }
