"""
DriveShare: доменный сервис бронирования для P2P-маркетплейса аренды автомобилей
"""
__version__ = "1.0.0"
