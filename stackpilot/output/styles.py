class Style:
    regular = ''
    context = 'grey50'
    info = 'bold'
    mark = 'cyan'
    mark_neutral = 'blue'
    good = 'green'
    suspicious = 'yellow'
    bad = 'bold red'
