#!/usr/bin/env python3

from sqlalchemy import (
    Column,
    String,
    Integer,
    DateTime,
    func,
)
from sqlalchemy.orm import declarative_base


class Base:
    def dict(self):
        '''
        Returns the column values of the object keyed by attribute name
        '''
        return {c.key: getattr(self, c.key) for c in self.__mapper__.column_attrs}


Base = declarative_base(cls=Base)


class Config (Base):
    '''
    Stores the configuration values for the application in key value pairs
    '''
    __tablename__ = 'configuration'

    name = Column(
        String(64),
        primary_key=True,
        doc="The setting's name")
    value = Column(
        'setting', String,
        doc="The setting's value")


class History (Base):
    '''
    Expressions entered in the interactive shell
    '''
    __tablename__ = 'history'

    id = Column(
        Integer,
        primary_key=True,
        doc='An autonumber id')
    expression = Column(
        String,
        nullable=False,
        doc='The expression as entered')
    result = Column(
        String,
        nullable=False,
        doc='The result or error message returned for the expression')
    created = Column(
        DateTime,
        nullable=False, server_default=func.now(),
        doc='When the expression was evaluated')

    def __str__(self):
        return '{0.expression} = {0.result}'.format(self)


if __name__ == '__main__':
    from operator import attrgetter

    for table in sorted(Base.metadata.tables.values(), key=attrgetter('name')):
        print(table.name)
        for column in table.columns:
            col = '{}: {}'.format(column.name, column.type)

            if column.primary_key:
                col += ' PK'

            if not column.nullable:
                col += ' NOT NULL'

            print('\t{}\n\t\t{}'.format(col, column.doc))
        print()
