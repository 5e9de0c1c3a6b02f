from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from package_express.config.settings import get_settings
from package_express.engine import QuoteEngine, Package

app = FastAPI(
    title="Package Express API",
    description="Shipping quotes for Package Express",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = QuoteEngine()


class QuoteRequest(BaseModel):
    weight: float = Field(allow_inf_nan=False)
    width: float = Field(allow_inf_nan=False)
    height: float = Field(allow_inf_nan=False)
    length: float = Field(allow_inf_nan=False)


@app.get("/")
async def root():
    return {"status": "online", "message": "Package Express API Active"}


@app.get("/limits")
async def get_limits():
    settings = get_settings()
    return {
        "max_weight": settings.max_weight,
        "max_dimensions": settings.max_dimensions,
        "cost_divisor": settings.cost_divisor,
    }


@app.post("/quote")
async def calculate_quote(req: QuoteRequest):
    # Rejections are normal quotes with status "rejected", not HTTP errors
    try:
        package = Package(weight=req.weight, width=req.width, height=req.height, length=req.length)
        quote = engine.calculate(package)
        return jsonable_encoder(quote.to_dict())
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
