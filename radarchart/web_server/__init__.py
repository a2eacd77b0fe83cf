from radarchart.web_server.web_server import ChartWebServer, ImageResponse

__all__ = ["ChartWebServer", "ImageResponse"]
