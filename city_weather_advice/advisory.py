import logging
from typing import List

from city_weather_advice.measurement import as_numeric

__all__ = ['build_advisory', 'advisory_text', 'condition_for_temp', 'condition_for_rain', 'ADVICE']

logger = logging.getLogger(__name__)

HOT = 'hot'
WARM = 'warm'
PLEASANT = 'pleasant'
COOL = 'cool'
COLD = 'cold'
HEAVY_RAIN = 'heavy rain'
SOME_RAIN = 'some rain'
MUGGY = 'muggy'

# Lower bound (inclusive) of each temperature band in °C, checked from the top down
TEMPERATURE_BANDS = [(35, HOT), (28, WARM), (20, PLEASANT), (10, COOL)]
RAIN_BANDS = [(70, HEAVY_RAIN), (40, SOME_RAIN)]
MUGGY_HUMIDITY = 80
MUGGY_TEMPERATURE = 28

ADVICE = {
    HOT: 'बहुत ज़्यादा गर्मी है, धूप में कम निकलें और खूब पानी पिएं।',
    WARM: 'मौसम गर्म है, हल्के और सूती कपड़े पहनें।',
    PLEASANT: 'मौसम सुहावना है, बाहर घूमने के लिए अच्छा समय है।',
    COOL: 'हल्की ठंड है, एक हल्की जैकेट साथ रखें।',
    COLD: 'काफ़ी ठंड है, गर्म कपड़े पहनकर ही बाहर निकलें।',
    HEAVY_RAIN: 'आज तेज़ बारिश की प्रबल संभावना है, छाता या रेनकोट ज़रूर साथ रखें।',
    SOME_RAIN: 'बारिश की संभावना है, छाता साथ रखना बेहतर होगा।',
    MUGGY: 'उमस भरी गर्मी है, पानी पीते रहें और भारी मेहनत से बचें।',
}


def condition_for_temp(temperature_c):
    """ Given a temperature (Celsius), return the band it falls in, or None when it's unknown """
    t = as_numeric(temperature_c)
    if not t.is_known:
        return None
    for lower_bound, condition in TEMPERATURE_BANDS:
        if t >= lower_bound:
            return condition
    return COLD


def condition_for_rain(rain_chance_pct):
    """ None when the chance is unknown or too low to mention """
    r = as_numeric(rain_chance_pct)
    for lower_bound, condition in RAIN_BANDS:
        if r >= lower_bound:
            return condition
    return None


def build_advisory(temperature_c, humidity_pct, rain_chance_pct) -> List[str]:
    """ Turn a set of readings into guidance sentences

    The rules are applied in a fixed order: temperature band, then rain chance, then humid heat.
    Each rule adds at most one sentence and a rule whose readings are unknown adds nothing.

    :param temperature_c: degrees Celsius (Numeric, number or None)
    :param humidity_pct: relative humidity in percent
    :param rain_chance_pct: today's maximum chance of precipitation in percent
    :return: a list of sentences, possibly empty
    """
    temperature_c = as_numeric(temperature_c)
    humidity_pct = as_numeric(humidity_pct)
    rain_chance_pct = as_numeric(rain_chance_pct)
    guidance = []

    temp_condition = condition_for_temp(temperature_c)
    if temp_condition is not None:
        guidance.append(ADVICE[temp_condition])

    rain_condition = condition_for_rain(rain_chance_pct)
    if rain_condition is not None:
        guidance.append(ADVICE[rain_condition])

    # Both comparisons are False when either reading is unknown
    if humidity_pct >= MUGGY_HUMIDITY and temperature_c >= MUGGY_TEMPERATURE:
        guidance.append(ADVICE[MUGGY])

    logger.debug(f'Advice for temp={temperature_c} humidity={humidity_pct} rain={rain_chance_pct}: '
                 f'{temp_condition}, {rain_condition}, {len(guidance)} sentence(s)')
    return guidance


def advisory_text(advisory: List[str]) -> str:
    return ' '.join(advisory)
