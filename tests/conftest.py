from contextlib import closing

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from yardcalc import model as m


@pytest.fixture
def session():
    engine = create_engine('sqlite://')
    m.Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    with closing(Session()) as session:
        yield session
    engine.dispose()


@pytest.fixture
def feed(monkeypatch):
    '''
    Replaces input() with a function returning the given lines, then EOF
    '''
    prompts = []

    def install(*lines):
        lines = iter(lines)

        def fake_input(prompt=''):
            prompts.append(prompt)
            try:
                return next(lines)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr('builtins.input', fake_input)
        return prompts

    return install
