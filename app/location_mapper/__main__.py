from location_mapper.main import app

app(prog_name="location-mapper")
