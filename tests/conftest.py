import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from app.main import app
from app.errors import DataAccessError

class FakeDatabase:
    """Records every statement and answers with queued rows, queued errors or a failure."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.error = None

    def queue(self, *row_sets):
        self.responses.extend(row_sets)

    def fail_with(self, message="connection refused"):
        self.error = DataAccessError(message, "", ())

    async def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        if self.error is not None:
            raise DataAccessError(self.error.message, sql, params)
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return []

    async def dispose(self):
        pass

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_params(self):
        return self.calls[-1][1]

@pytest.fixture
def fake_db():
    return FakeDatabase()

@pytest_asyncio.fixture
async def client(fake_db):
    app.state.db = fake_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.state.db = None

@pytest.fixture
def property_row():
    return {
        "id": 1,
        "owner_id": 2,
        "title": "Speed lamp",
        "cost_per_night": 93061,
        "city": "Sotboske",
        "average_rating": 4.2,
    }
