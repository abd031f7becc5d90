"""Console script for city_weather_advice."""
import functools
import sys
import textwrap

import click
import requests

from city_weather_advice import config, configure_logging
from city_weather_advice.location import resolve_city
from city_weather_advice.orchestrator import AdvisorView, RequestState, WeatherAdvisor
from city_weather_advice.weather_observation import fetch_weather

Colors = {'Title': 'blue', 'Description': 'cyan', 'Prompt': 'yellow', 'Error': 'red', 'Output': 'green',
          'Alternate_Output': 'cyan'}

TITLE = f'#{"-" * 18} City Weather Advice {"-" * 18}#'
QUIT_WORDS = ['q', 'quit', 'exit']


class ConsoleView(AdvisorView):
    """ Shows the advisor's status and results on the terminal """

    def __init__(self):
        self.busy = False
        self.last_status = ''

    def set_busy(self, busy: bool):
        self.busy = busy

    def show_status(self, message: str):
        self.last_status = message
        if message:
            click.secho(message, fg=Colors['Description'] if message == config.LOADING_MESSAGE else Colors['Error'])

    def show_results(self, fields):
        click.secho(f'\n{fields.location}', fg=Colors['Title'], bold=True)
        click.secho(f'\tTemperature: {fields.temperature} °C', fg=Colors['Output'])
        click.secho(f'\tHumidity: {fields.humidity} %', fg=Colors['Output'])
        click.secho(f'\tChance of rain: {fields.rain_chance} %', fg=Colors['Output'])
        if fields.advice:
            click.secho(fields.advice, fg=Colors['Alternate_Output'])
        click.secho(fields.updated_at, fg=Colors['Description'])


def build_advisor(view, session=None):
    """ Wire the advisor to the real services, sharing one HTTP session for both lookups """
    return WeatherAdvisor(view,
                          resolver=functools.partial(resolve_city, session=session),
                          fetcher=functools.partial(fetch_weather, session=session))


@click.command('city-weather')
@click.argument('city', required=False)
@click.option('--verbose', '-v', is_flag=True, help='show debug messages on the console')
def main(city, verbose):
    """ Show the current weather and some advice for CITY """
    configure_logging(verbose)
    if city is None:
        city = click.prompt(_prompt('Which city?'), default='', show_default=False)
    view = ConsoleView()
    with requests.Session() as session:
        outcome = build_advisor(view, session).request(city)
    sys.exit(0 if outcome is RequestState.SUCCESS else 1)


@click.command('city-weather-interactive')
@click.option('--verbose', '-v', is_flag=True, help='show debug messages on the console')
def interactive(verbose):
    """ Keep asking for cities until you type q """
    configure_logging(verbose)
    click.secho(TITLE, fg=Colors['Title'])
    [click.secho(line, fg=Colors['Description'])
     for line in textwrap.wrap('Type a city name to see its weather right now and some advice for the day. '
                               'Type q to quit.', 60)]
    view = ConsoleView()
    with requests.Session() as session:
        advisor = build_advisor(view, session)
        while True:
            city = click.prompt(_prompt('\nCity'), default='', show_default=False)
            if city.strip().lower() in QUIT_WORDS:
                break
            advisor.request(city)


def _prompt(s: str):
    return click.style(s, fg=Colors['Prompt'])


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
