from django.conf import settings

from clubdata.store import OptionStore

DEFAULT_OPTION_NAME = 'vdm_clubdata'


class ClubDataConfig(object):
    '''Locates the club data record: the option name it is kept under and the store keeping it.'''

    def __init__(self, option_name=DEFAULT_OPTION_NAME, store=None):
        self.option_name = option_name
        self.store = store if store is not None else OptionStore()

    @classmethod
    def from_settings(cls):
        return cls(option_name=getattr(settings, 'CLUBDATA_OPTION_NAME', DEFAULT_OPTION_NAME))

    def __repr__(self):
        return f'{self.__class__.__name__}(option_name={self.option_name!r})'
