import pytest
from unittest.mock import AsyncMock, MagicMock
from lightbnb.db.store import Store

def make_engine(rows=(), first=None):
    result = MagicMock()
    result.mappings.return_value.all.return_value = list(rows)
    result.mappings.return_value.first.return_value = first

    conn = MagicMock()
    conn.exec_driver_sql = AsyncMock(return_value=result)

    connect_ctx = MagicMock()
    connect_ctx.__aenter__.return_value = conn
    connect_ctx.__aexit__.return_value = False
    begin_ctx = MagicMock()
    begin_ctx.__aenter__.return_value = conn
    begin_ctx.__aexit__.return_value = False

    engine = MagicMock()
    engine.connect.return_value = connect_ctx
    engine.begin.return_value = begin_ctx
    engine.dispose = AsyncMock()
    return engine, conn, connect_ctx, begin_ctx

@pytest.mark.asyncio
async def test_fetch_all_reads_on_connect():
    engine, conn, connect_ctx, _ = make_engine(rows=[{"id": 1, "city": "Vancouver"}, {"id": 2, "city": "Victoria"}])
    rows = await Store(engine).fetch_all("SELECT * FROM properties WHERE city LIKE $1 LIMIT $2;", ["%V%", 5])

    assert rows == [{"id": 1, "city": "Vancouver"}, {"id": 2, "city": "Victoria"}]
    assert all(type(row) is dict for row in rows)
    engine.connect.assert_called_once_with()
    engine.begin.assert_not_called()
    conn.exec_driver_sql.assert_awaited_once_with("SELECT * FROM properties WHERE city LIKE $1 LIMIT $2;", ("%V%", 5))
    connect_ctx.__aexit__.assert_awaited_once()

@pytest.mark.asyncio
async def test_fetch_one_first_row_or_none():
    engine, _, _, _ = make_engine(rows=[{"id": 3}, {"id": 4}])
    assert await Store(engine).fetch_one("SELECT * FROM users WHERE id = $1;", [3]) == {"id": 3}

    empty, conn, _, _ = make_engine()
    assert await Store(empty).fetch_one("SELECT * FROM users WHERE id = $1;", [99]) is None
    conn.exec_driver_sql.assert_awaited_once_with("SELECT * FROM users WHERE id = $1;", (99,))

@pytest.mark.asyncio
async def test_execute_returning_writes_on_begin():
    engine, conn, _, begin_ctx = make_engine(first={"id": 7})
    row = await Store(engine).execute_returning("INSERT INTO users (name) VALUES ($1) RETURNING id;", ["A"])

    assert row == {"id": 7}
    assert type(row) is dict
    engine.begin.assert_called_once_with()
    engine.connect.assert_not_called()
    conn.exec_driver_sql.assert_awaited_once_with("INSERT INTO users (name) VALUES ($1) RETURNING id;", ("A",))
    # leaving engine.begin() is what commits
    begin_ctx.__aexit__.assert_awaited_once()
    assert begin_ctx.__aexit__.await_args.args == (None, None, None)

@pytest.mark.asyncio
async def test_execute_returning_without_row():
    engine, _, _, _ = make_engine(first=None)
    assert await Store(engine).execute_returning("INSERT INTO users (name) VALUES ($1) RETURNING id;", ["A"]) is None

@pytest.mark.asyncio
async def test_driver_errors_propagate_and_roll_back():
    engine, conn, _, begin_ctx = make_engine()
    conn.exec_driver_sql.side_effect = OSError("connection refused")
    with pytest.raises(OSError):
        await Store(engine).execute_returning("INSERT INTO users (name) VALUES ($1) RETURNING id;", ["A"])
    exc_type = begin_ctx.__aexit__.await_args.args[0]
    assert exc_type is OSError

@pytest.mark.asyncio
async def test_dispose_closes_engine():
    engine, _, _, _ = make_engine()
    await Store(engine).dispose()
    engine.dispose.assert_awaited_once()
