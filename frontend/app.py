import dash
import dash_bootstrap_components as dbc

from cityroute.config import DEFAULT_CONFIG_PATH, load_city_names, load_config
from cityroute.log import set_global_log_level

# Import layout and callback functions from other files in this package
from .layout import build_layout
from .callbacks import register_callbacks

config = load_config(DEFAULT_CONFIG_PATH)
set_global_log_level(config["log_level"])
cities = load_city_names(config["cities_path"])

# Initialize the Dash app
app = dash.Dash(__name__, external_stylesheets=[dbc.themes.BOOTSTRAP])
app.title = "Shortest route"

app.layout = build_layout(num_edges=config["num_edges"], seed=config["seed"])

register_callbacks(app, config, cities)
