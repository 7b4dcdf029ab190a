from .. import model as m


def sql_update(session, type, keys, values):
    '''
    Updates a sql object, creating it if it does not exist
    '''
    obj = session.query(type)\
        .filter_by(**keys).one_or_none()
    if obj is not None:
        for value in values:
            setattr(obj, value, values[value])
    else:
        values = values.copy()
        values.update(keys)
        obj = type(**values)
        session.add(obj)

    session.commit()

    return obj


def load_config(session, defaults):
    '''
    Reads configuration values, storing defaults for any that are missing
    Returns a dict with the same keys as defaults
    '''
    config = defaults.copy()
    for name in config:
        key = session.get(m.Config, name)
        if key is not None:
            config[name] = key.value
        else:
            session.add(m.Config(name=name, value=config[name]))
    session.commit()
    return config


def recent_history(session, limit):
    '''
    Gets the most recent history entries, oldest first
    '''
    items = session.query(m.History)\
        .order_by(m.History.id.desc())\
        .limit(limit).all()
    return items[::-1]
