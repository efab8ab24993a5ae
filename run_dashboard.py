from frontend.app import app

# This is the entry point to run the Dash server
if __name__ == "__main__":
    print("Starting Dash server...")
    print("Dashboard will be running at http://127.0.0.1:8050/")
    app.run(debug=True, port=8050)
