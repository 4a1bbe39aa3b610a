from ai_search_bot.delivery.sequencer import DeliverySequencer

__all__ = ["DeliverySequencer"]
