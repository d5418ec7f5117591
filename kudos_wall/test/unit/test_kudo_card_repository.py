# kudos_wall/test/unit/test_kudo_card_repository.py

# Para rodar o arquivo
# pytest kudos_wall/test/unit/test_kudo_card_repository.py -v

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from kudos_wall.adapters.outbound.persistence.repositories.kudo_card_repository import AsyncKudoCardRepository
from kudos_wall.domain.models.kudo_card_domain_model import KudoCardFilter


@pytest.fixture
def session():
    db = AsyncMock()
    result = MagicMock()
    result.unique.return_value.scalars.return_value.all.return_value = []
    db.execute.return_value = result
    return db


async def compiled_listing(session, filters: KudoCardFilter):
    cards = await AsyncKudoCardRepository(session).list(filters)
    assert cards == []

    statement = session.execute.await_args.args[0]
    return statement.compile(dialect=postgresql.dialect())


@pytest.mark.asyncio
async def test_search_term_wildcards_are_matched_literally(session):
    compiled = await compiled_listing(session, KudoCardFilter(search_term="100%_done"))

    sql = str(compiled)
    values = list(compiled.params.values())

    assert sql.count("ESCAPE '/'") == 4
    assert values.count("100/%/_done") == 4
    assert "100%_done" not in values


@pytest.mark.asyncio
async def test_recipient_name_wildcards_are_matched_literally(session):
    compiled = await compiled_listing(session, KudoCardFilter(recipient_name="B_b"))

    assert "ESCAPE '/'" in str(compiled)
    assert "B/_b" in compiled.params.values()
    assert "B_b" not in compiled.params.values()


@pytest.mark.asyncio
async def test_filters_are_case_insensitive(session):
    compiled = await compiled_listing(session, KudoCardFilter(recipient_name="Bob"))

    assert "lower(kudos.recipient_name)" in str(compiled)
