import json

from django.core.management.base import BaseCommand, CommandError

from clubdata.config import ClubDataConfig
from clubdata.record import STORED_FIELDS, get_clubdata, load, render_public_fragment, save


class Command(BaseCommand):

    help = 'Show, render, replace or delete the club data record'

    def add_arguments(self, parser):

        """Define the same arguments as the ones in CLI."""

        parser.add_argument('--field', nargs='?', type=str, help='Print a single field, HTML-escaped.')
        parser.add_argument('--render', action='store_true', help='Print the public club data fragment.')
        parser.add_argument('--set', action='store_true',
                            help='Replace the record with the given fields. Fields not given are cleared.')
        parser.add_argument('--delete', action='store_true', help='Delete the record.')
        parser.add_argument('--phone', nargs='?', type=str, help='Phone number, used with --set.')
        parser.add_argument('--email', nargs='?', type=str, help='Email address, used with --set.')
        parser.add_argument('--address', nargs='?', type=str, help='Address, used with --set.')

    def handle(self, *args, **options):

        config = ClubDataConfig.from_settings()
        submitted = {name: options[name] for name in STORED_FIELDS if options.get(name) is not None}

        if submitted and not options['set']:
            raise CommandError('--phone, --email and --address are only accepted with --set')

        if options['delete']:
            if config.store.delete(config.option_name):
                self.stdout.write(self.style.SUCCESS('Club data deleted'))
            else:
                self.stdout.write('No club data stored. Skipping...')

        elif options['set']:
            save(config, submitted)
            self.stdout.write(self.style.SUCCESS('Club data saved'))

        elif options['render']:
            self.stdout.write(render_public_fragment(load(config)))

        else:
            data = get_clubdata(config, options['field'] or '')
            if isinstance(data, str):
                self.stdout.write(data)
            else:
                self.stdout.write(json.dumps(data, ensure_ascii=False, indent=2))
