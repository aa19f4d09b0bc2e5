from __future__ import annotations

from fastapi import FastAPI

from checkout_api.api.routers.checkout import router as checkout_router


app = FastAPI(title="Checkout API")
app.include_router(checkout_router)
