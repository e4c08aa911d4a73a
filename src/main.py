import uvicorn
from fastapi import FastAPI, Response

import config
from auth.app import router as auth_router
from catalog.app import router as catalog_router

app = FastAPI(title="Sanrio Accounts")

app.include_router(auth_router)
app.include_router(catalog_router)


@app.get("/health")
def health():
    return Response(status_code=200)


def run():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
