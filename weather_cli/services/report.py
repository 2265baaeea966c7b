from weather_cli.schemas.weather import WeatherReport
from weather_cli.services.compass import to_compass
from weather_cli.services.time_format import format_utc_time


def render(report: WeatherReport) -> str:
    """
    Build the human-readable report block.

    Temperatures and wind speed use one decimal place. Sun times are
    converted before the block is assembled, so a bad timestamp raises
    without producing partial text.
    """
    sunrise = format_utc_time(report.station.sunrise)
    sunset = format_utc_time(report.station.sunset)
    main = report.measurements

    return (
        f"location:       {report.location_name}, {report.station.country_code}\n"
        f"temperature:    {main.temperature:.1f}°C\n"
        f"feels like:     {main.feels_like:.1f}°C\n"
        f"humidity:       {main.humidity}%\n"
        f"wind:           {report.wind.speed:.1f}m/s\n"
        f"wind direction: {to_compass(report.wind.direction_degrees)}\n"
        f"sunrise:        {sunrise} UTC\n"
        f"sunset:         {sunset} UTC"
    )
