"""
Edge collector: receives page views and session recordings from browsers and
forwards them to a Kafka-compatible event log.
"""
