import os
import sys

from cityroute.config import DEFAULT_CONFIG_PATH, load_city_names, load_config
from cityroute.errors import CityRouteError
from cityroute.log import set_global_log_level
from cityroute.planner import format_route_details, plan_random_route


def main(config_path=DEFAULT_CONFIG_PATH):
    config = load_config(config_path)
    set_global_log_level(config["log_level"])
    cities = load_city_names(config["cities_path"])

    result = plan_random_route(cities, config)

    print(f"Path between {result['start']} & {result['end']}")
    for line in format_route_details(result):
        print(line)
    print("Graph summary:", result["summary"])

    output_path = config["output_path"]
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(result["image_png"])
    print("Saved graph image to:", output_path)
    return result


if __name__ == "__main__":
    try:
        main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH)
    except CityRouteError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
