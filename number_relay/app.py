import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .relay import InvalidSeriesError, NumberRelay


def create_app(relay: NumberRelay) -> FastAPI:
    app = FastAPI(title="number-relay")

    @app.get("/numbers/{numberid}")
    def get_numbers(numberid: str):
        try:
            result = relay.handle(numberid)
        except InvalidSeriesError:
            return JSONResponse(status_code=400, content={"error": "Invalid number ID"})
        except Exception:
            logging.exception("Unexpected failure handling /numbers/%s", numberid)
            return JSONResponse(
                status_code=500,
                content={"error": "Error fetching data from third-party server"},
            )
        return result.to_dict()

    return app
