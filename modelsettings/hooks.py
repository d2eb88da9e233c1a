"""
    hooks.py: record lifecycle callbacks for the settings attributes

    - populate_defaults: called before a record is inserted
    - filter_allowed: called before every insert and update

    `register` attaches both to a model (mixin) class as SQLAlchemy mapper events.

    The mapper events only see loaded attribute values: an expired attribute isn't written
    by the UPDATE so it isn't filtered either. `SettingsRecord.save` loads and filters the
    allow-listed attributes before flushing, so stored keys that aren't allowed are removed
    on every save, also when only another column changed.
"""
import copy
from sqlalchemy import event
import modelsettings
from .dot_path import only

# (class, attribute) pairs passed to `register`
REGISTERED = []


def populate_defaults(record, attribute: str) -> None:
    """
    Set the record attribute to the default mapping when it's empty
    :param record: the record that will be inserted
    :param attribute: settings attribute name
    """
    if getattr(record, attribute, None):
        return
    defaults = record._s_defaults(attribute)
    modelsettings.log.debug(f"{record.__class__.__name__}.{attribute}: populating defaults {defaults}")
    setattr(record, attribute, copy.deepcopy(defaults))


def filter_allowed(record, attribute: str) -> None:
    """
    Remove the top-level keys that aren't allowed by the record class
    :param record: the record that will be saved
    :param attribute: settings attribute name
    """
    allowed = record._s_allowed_keys(attribute)
    if allowed is None:
        return
    # expired/unloaded values won't be written
    value = record.__dict__.get(attribute)
    if not value:
        return
    filtered = only(value, allowed)
    if len(filtered) != len(value):
        dropped = [k for k in value if k not in filtered]
        modelsettings.log.debug(f"{record.__class__.__name__}.{attribute}: dropping keys {dropped}")
        setattr(record, attribute, filtered)


def register(cls, attribute: str) -> None:
    """
    Register the lifecycle callbacks on `cls` and its subclasses
    :param cls: mapped class or mixin
    :param attribute: settings attribute name
    """
    REGISTERED.append((cls, attribute))

    @event.listens_for(cls, "before_insert", propagate=True)
    def before_insert(mapper, connection, target):
        populate_defaults(target, attribute)
        filter_allowed(target, attribute)

    @event.listens_for(cls, "before_update", propagate=True)
    def before_update(mapper, connection, target):
        filter_allowed(target, attribute)


def registered_attributes(record) -> list:
    """
    :return: names of the settings attributes registered for the class of `record`
    """
    return [attribute for cls, attribute in REGISTERED if isinstance(record, cls)]
