from fastapi import FastAPI

from storefront.database import Base, engine
from storefront.logging_config import setup_logging
from storefront.routes import router

setup_logging()

app = FastAPI(title="Print Storefront Order Service")

app.include_router(router)

Base.metadata.create_all(bind=engine)
