# demo.py

import argparse
from stylish import Interface, StringAttributes
from stylish.attributes import Color, Font, Kern
from stylish.attributes.values import FontDescriptor, color_from_white

def main():
    parser = argparse.ArgumentParser(description='Stylish demo')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    parser.add_argument('--show-dict',
        action='store_true',
        help='Print the serialized attribute dictionary')

    args = parser.parse_args()

    stylish = Interface(
        logging_enabled=args.enable_logging,
        log_file=args.log_file
    )

    # Attributes created via chaining
    attributes = (StringAttributes()
                  .color_rgb(0.0, 0.5, 0.5)
                  .font("AvenirNext-Bold", 40)
                  .kern(2))
    substring_attributes = attributes.color("magenta")

    top = stylish.label("Hello World")
    top.style_text("Hello World", attributes)
    top.style_substring("Hello", substring_attributes)
    stylish.print(top)

    if args.show_dict:
        print(attributes.to_dict())

    # Attributes created in-line
    bottom = stylish.label("Goodbye World")
    bottom.style_text("Goodbye World", lambda: [
        Color(color_from_white(0.9)),
        Font(FontDescriptor("System", 30, italic=True)),
        Kern(15),
    ])
    stylish.print(bottom)

if __name__ == "__main__":
    main()
