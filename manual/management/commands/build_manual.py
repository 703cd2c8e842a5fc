"""
Management command to build the offline reference manual page.

Compiles the reference and category sources and renders them through the
same template as the live view, writing a single self-contained HTML file.
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.template.loader import render_to_string

from manual.loader import ManualSourceError, load_manual
from manual.views import build_manual_context


class Command(BaseCommand):
    help = 'Compile the reference manual sources into a single HTML page'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reference',
            type=str,
            help='Reference source file (default: MANUAL_REFERENCE_PATH)',
        )
        parser.add_argument(
            '--category',
            type=str,
            help='Category source file (default: MANUAL_CATEGORY_PATH)',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Write the page to this file instead of stdout',
        )
        parser.add_argument(
            '--stats',
            action='store_true',
            help='Show heading, section, category and keyword counts',
        )

    def handle(self, *args, **options):
        reference_path = options.get('reference')
        category_path = options.get('category')
        output = options.get('output')
        show_stats = options.get('stats')

        try:
            manual = load_manual(reference_path, category_path)
        except ManualSourceError as e:
            self.stderr.write(self.style.ERROR(str(e)))
            raise CommandError(str(e)) from e

        page = render_to_string('manual/reference.html', build_manual_context(manual))

        if output:
            Path(output).write_text(page, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Wrote manual to {output}'))
        else:
            self.stdout.write(page)

        if show_stats:
            self.stdout.write('\n' + '=' * 60)
            self.stdout.write('MANUAL STATISTICS')
            self.stdout.write('=' * 60)
            self.stdout.write(f"Reference headings: {len(manual.reference.headings)}")
            self.stdout.write(f"Reference sections: {len(manual.reference.sections)}")
            self.stdout.write(f"Category headings:  {len(manual.category.headings)}")
            self.stdout.write(f"Categories:         {len(manual.categories)}")
            self.stdout.write(f"Keywords:           {len(manual.keywords)}")

            missing = [s.title for s in manual.reference.sections if not s.short_description]
            if missing:
                self.stdout.write(
                    self.style.WARNING(
                        f"Sections without a short description: {', '.join(missing)}"
                    )
                )
            self.stdout.write('=' * 60)
