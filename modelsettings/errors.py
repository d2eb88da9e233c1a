# Exception classes
#
# The application loglevel determines the level of detail in the exception messages.
# If set to debug, the underlying database error is added to the message.
#
# Only StorageError reaches the caller of the accessor mutators,
# DecodeError is caught by the column type and turned into an empty mapping.
#
import traceback
from sqlalchemy.exc import DontWrapMixin
import modelsettings
from .config import is_debug

HIDDEN_LOG = "(debug logging disabled)"


class ModelSettingsError(Exception, DontWrapMixin):
    pass


class StorageError(ModelSettingsError):
    """
    This exception is raised when a record could not be persisted
    """

    message = "Storage Error: "

    def __init__(self, message="", record=None):
        """
        :param message: Message or the original exception
        :param record: the record that failed to save
        """
        Exception.__init__(self)
        self.record = record
        modelsettings.log.error("Storage Error: %s", message)
        if is_debug():
            modelsettings.log.debug(traceback.format_exc(120))
            self.message += str(message)
        else:
            self.message += HIDDEN_LOG

    def __str__(self):
        return self.message


class DecodeError(ModelSettingsError):
    """
    This exception is raised when stored settings text can't be decoded to a mapping
    """

    message = "Decode Error: "

    def __init__(self, message="", raw=None):
        Exception.__init__(self)
        self.raw = raw
        self.message += str(message)

    def __str__(self):
        return self.message
