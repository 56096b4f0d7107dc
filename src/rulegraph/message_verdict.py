from dataclasses import dataclass


@dataclass
class MessageVerdict:
    message: str = ''
    matches: bool = False

    def __str__(self):
        return '%s %s' % (self.message, 'matches' if self.matches else 'does not match')
