import logging

from django.db import transaction

from clubdata.models import Option

logger = logging.getLogger('clubdata')


class OptionStore(object):
    '''
    Gets and sets named option records. A sanitizer given to update() is applied to the value before it is written,
    so callers never store unsanitized input by mistake.
    '''
    model = Option

    def get(self, name):
        '''returns the mapping stored under name, or None when there is none'''
        try:
            value = self.model.objects.get(name=name).value
        except self.model.DoesNotExist:
            return None

        if not isinstance(value, dict):
            logger.warning(f'Option {name} holds a {type(value).__name__} instead of a mapping, ignoring it')
            return None

        return value

    def update(self, name, value, sanitizer=None):
        if sanitizer is not None:
            value = sanitizer(value)

        with transaction.atomic():
            self.model.objects.update_or_create(name=name, defaults={'value': value})

        logger.info(f'Option {name} updated')
        return value

    def delete(self, name):
        deleted, _ = self.model.objects.filter(name=name).delete()
        if deleted:
            logger.info(f'Option {name} deleted')
        return bool(deleted)
