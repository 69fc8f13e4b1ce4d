"""Main application"""

from svggraph.page import SvgGraphPage


def main():
    """Main"""
    page = SvgGraphPage()
    page.draw_graph({"Q1": 25, "Median": 50, "Q3": 75}, [0.1, 0.25, 0.5, 0.75, 0.9])

    page.save_as("main_app.svg")

    print("file saved.")


if __name__ == "__main__":
    main()
